"""
Customer form actions: create, update and delete customers
"""

from sqlalchemy import delete, insert, update

from dashboard import schemas
from dashboard.models.customer import Customer
from dashboard.services.mutation import (
    CUSTOMERS_PATH, DASHBOARD_PATH, INVOICES_PATH,
    execute_one, invalidate, validation_failed
)
from dashboard.services.outcomes import Ok, Redirect


def create_customer(form):
    result = schemas.CreateCustomer.from_form(form)
    if not result.success:
        return validation_failed(result.errors, 'Create', 'Customer')

    fields = result.data
    failure = execute_one(
        insert(Customer).values(
            name=fields.name,
            email=fields.email,
            image_url=fields.image
        ),
        'Create', 'Customer'
    )
    if failure:
        return failure

    invalidate(CUSTOMERS_PATH, DASHBOARD_PATH)
    return Redirect(CUSTOMERS_PATH)


def update_customer(customer_id, form):
    result = schemas.UpdateCustomer.from_form(form)
    if not result.success:
        return validation_failed(result.errors, 'Update', 'Customer')

    fields = result.data
    failure = execute_one(
        update(Customer)
        .where(Customer.id == customer_id)
        .values(
            name=fields.name,
            email=fields.email,
            image_url=fields.image
        )
        .execution_options(synchronize_session=False),
        'Update', 'Customer'
    )
    if failure:
        return failure

    # Invoice listing rows carry the customer name, email and image
    invalidate(CUSTOMERS_PATH, INVOICES_PATH, DASHBOARD_PATH)
    return Redirect(CUSTOMERS_PATH)


def delete_customer(customer_id):
    """Delete a customer; fails while invoices still reference it."""
    failure = execute_one(
        delete(Customer)
        .where(Customer.id == customer_id)
        .execution_options(synchronize_session=False),
        'Delete', 'Customer'
    )
    if failure:
        return failure

    invalidate(CUSTOMERS_PATH, DASHBOARD_PATH)
    return Ok('Deleted Customer.')
