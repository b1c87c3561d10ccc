"""
Invoice form actions: create, update and delete invoices
"""

from datetime import datetime, timezone

from sqlalchemy import delete, insert, update

from dashboard import schemas
from dashboard.models.invoice import Invoice
from dashboard.services.mutation import (
    CUSTOMERS_PATH, DASHBOARD_PATH, INVOICES_PATH,
    execute_one, invalidate, validation_failed
)
from dashboard.services.outcomes import Ok, Redirect

# Customer listing rows carry per-customer invoice totals
INVOICE_VIEWS = (INVOICES_PATH, CUSTOMERS_PATH, DASHBOARD_PATH)


def create_invoice(form):
    """Validate a new invoice submission and insert it dated today (UTC)."""
    result = schemas.CreateInvoice.from_form(form)
    if not result.success:
        return validation_failed(result.errors, 'Create', 'Invoice')

    fields = result.data
    today = datetime.now(timezone.utc).date()

    failure = execute_one(
        insert(Invoice).values(
            customer_id=fields.customer_id,
            amount=fields.amount_in_cents,
            status=fields.status,
            date=today
        ),
        'Create', 'Invoice'
    )
    if failure:
        return failure

    invalidate(*INVOICE_VIEWS)
    return Redirect(INVOICES_PATH)


def update_invoice(invoice_id, form):
    """Validate an invoice submission and overwrite customer, amount and status."""
    result = schemas.UpdateInvoice.from_form(form)
    if not result.success:
        return validation_failed(result.errors, 'Update', 'Invoice')

    fields = result.data
    failure = execute_one(
        update(Invoice)
        .where(Invoice.id == invoice_id)
        .values(
            customer_id=fields.customer_id,
            amount=fields.amount_in_cents,
            status=fields.status
        )
        .execution_options(synchronize_session=False),
        'Update', 'Invoice'
    )
    if failure:
        return failure

    invalidate(*INVOICE_VIEWS)
    return Redirect(INVOICES_PATH)


def delete_invoice(invoice_id):
    failure = execute_one(
        delete(Invoice)
        .where(Invoice.id == invoice_id)
        .execution_options(synchronize_session=False),
        'Delete', 'Invoice'
    )
    if failure:
        return failure

    invalidate(*INVOICE_VIEWS)
    return Ok('Deleted Invoice.')
