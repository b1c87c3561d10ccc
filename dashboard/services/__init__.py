"""
Form actions for the Invoice Dashboard
Each action validates a submission, runs one write and reports an outcome
"""

from dashboard.services.invoice_service import create_invoice, update_invoice, delete_invoice
from dashboard.services.customer_service import create_customer, update_customer, delete_customer
from dashboard.services.user_service import create_user
from dashboard.services.auth_service import authenticate
from dashboard.services.outcomes import Ok, PersistenceFailed, Redirect, ValidationFailed

__all__ = [
    'create_invoice',
    'update_invoice',
    'delete_invoice',
    'create_customer',
    'update_customer',
    'delete_customer',
    'create_user',
    'authenticate',
    'Ok',
    'PersistenceFailed',
    'Redirect',
    'ValidationFailed'
]
