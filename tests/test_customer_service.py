# Customer form actions against an in-memory database
from dashboard import db, view_cache
from dashboard.models import Customer
from dashboard.services import (
    Ok, PersistenceFailed, Redirect, ValidationFailed,
    create_customer, delete_customer, update_customer
)


def test_create_customer(app, statements):
    view_cache.set("/dashboard/customers", ["stale"])
    statements.clear()

    outcome = create_customer({"name": "Jane Doe", "email": "jane@x.com"})

    assert outcome == Redirect("/dashboard/customers")
    written = statements.writes()
    assert len(written) == 1
    assert written[0].lstrip().upper().startswith("INSERT INTO CUSTOMERS")
    assert "/dashboard/customers" not in view_cache

    customer = db.session.execute(db.select(Customer)).scalar_one()
    assert customer.name == "Jane Doe"
    assert customer.email == "jane@x.com"
    assert customer.image_url is None


def test_create_customer_short_name(app, statements):
    statements.clear()
    outcome = create_customer({"name": "Jo", "email": "jo@x.com", "image": ""})

    assert isinstance(outcome, ValidationFailed)
    assert outcome.errors["name"] == ["Please enter your full name."]
    assert outcome.message == "Missing Fields. Failed to Create Customer."
    assert statements.writes() == []


def test_update_customer(customer_id, statements):
    statements.clear()
    outcome = update_customer(customer_id, {
        "id": "someone-else",
        "name": "Jane Smith",
        "email": "jane.smith@x.com",
        "image": "/customers/jane.png",
    })

    assert outcome == Redirect("/dashboard/customers")
    assert len(statements.writes()) == 1

    customer = db.session.get(Customer, customer_id, populate_existing=True)
    assert customer.name == "Jane Smith"
    assert customer.email == "jane.smith@x.com"
    assert customer.image_url == "/customers/jane.png"


def test_update_customer_validation_message(customer_id):
    outcome = update_customer(customer_id, {"name": "Jane Smith", "email": "nope"})
    assert outcome.to_state() == {
        "errors": {"email": ["Please enter a valid email address."]},
        "message": "Missing Fields. Failed to Update Customer.",
    }


def test_delete_customer(customer_id):
    view_cache.set("/dashboard/customers", ["stale"])

    assert delete_customer(customer_id) == Ok("Deleted Customer.")
    assert "/dashboard/customers" not in view_cache


def test_delete_customer_with_invoices_fails(invoice_id, customer_id):
    view_cache.set("/dashboard/customers", ["cached"])

    outcome = delete_customer(customer_id)

    assert outcome == PersistenceFailed("Database Error: Failed to Delete Customer.")
    assert "/dashboard/customers" in view_cache
    assert db.session.execute(db.select(db.func.count(Customer.id))).scalar_one() == 1
