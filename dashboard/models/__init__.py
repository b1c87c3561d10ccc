"""
Database models for the Invoice Dashboard
"""

from dashboard.models.user import User
from dashboard.models.customer import Customer
from dashboard.models.invoice import Invoice, INVOICE_STATUSES

__all__ = [
    'User',
    'Customer',
    'Invoice',
    'INVOICE_STATUSES'
]
