# Invoice form actions against an in-memory database
from datetime import date, datetime, timezone

from sqlalchemy.exc import OperationalError

from dashboard import db, view_cache
from dashboard.models import Invoice
from dashboard.services import (
    Ok, PersistenceFailed, Redirect, ValidationFailed,
    create_invoice, delete_invoice, update_invoice
)


def test_zero_amount_is_rejected_without_writing(customer_id, statements):
    statements.clear()
    outcome = create_invoice({"customerId": "c1", "amount": "0", "status": "pending"})

    assert isinstance(outcome, ValidationFailed)
    assert outcome.to_state() == {
        "errors": {"amount": ["Please enter an amount greater than $0."]},
        "message": "Missing Fields. Failed to Create Invoice.",
    }
    assert statements.writes() == []


def test_fraction_of_a_cent_is_a_validation_failure(customer_id, statements):
    statements.clear()
    outcome = create_invoice({"customerId": customer_id, "amount": "0.001", "status": "paid"})

    assert outcome == ValidationFailed(
        errors={"amount": ["Please enter an amount greater than $0."]},
        message="Missing Fields. Failed to Create Invoice.",
    )
    assert statements.writes() == []


def test_create_invoice_persists_cents_and_today(customer_id, statements):
    view_cache.set("/dashboard/invoices", ["stale"])
    statements.clear()

    outcome = create_invoice({
        "customerId": customer_id,
        "amount": "12.50",
        "status": "pending",
        "date": "2001-02-03",
        "id": "chosen-by-caller",
    })

    assert outcome == Redirect("/dashboard/invoices")
    written = statements.writes()
    assert len(written) == 1
    assert written[0].lstrip().upper().startswith("INSERT INTO INVOICES")

    invoice = db.session.execute(db.select(Invoice)).scalar_one()
    assert invoice.amount == 1250
    assert invoice.date == datetime.now(timezone.utc).date()
    assert invoice.id != "chosen-by-caller"
    assert "/dashboard/invoices" not in view_cache


def test_create_invoice_unknown_customer_reports_database_error(app, customer_id):
    outcome = create_invoice({"customerId": "missing", "amount": "5", "status": "paid"})

    assert outcome == PersistenceFailed("Database Error: Failed to Create Invoice.")
    assert outcome.to_state() == {"message": "Database Error: Failed to Create Invoice."}
    assert db.session.execute(db.select(db.func.count(Invoice.id))).scalar_one() == 0


def test_update_invoice_keeps_date(invoice_id, customer_id, statements):
    statements.clear()
    outcome = update_invoice(invoice_id, {
        "customerId": customer_id,
        "amount": "99.99",
        "status": "paid",
        "date": "1999-01-01",
    })

    assert outcome == Redirect("/dashboard/invoices")
    assert len(statements.writes()) == 1
    assert statements.writes()[0].lstrip().upper().startswith("UPDATE INVOICES")

    invoice = db.session.get(Invoice, invoice_id, populate_existing=True)
    assert invoice.amount == 9999
    assert invoice.status == "paid"
    assert invoice.date == date(2024, 1, 15)


def test_update_invoice_validation_message(invoice_id):
    outcome = update_invoice(invoice_id, {"customerId": "c1", "amount": "10", "status": "lost"})
    assert outcome.message == "Missing Fields. Failed to Update Invoice."
    assert outcome.errors == {"status": ["Please select an invoice status."]}


def test_delete_invoice(invoice_id):
    view_cache.set("/dashboard/invoices", ["stale"])
    view_cache.set("/dashboard/customers", ["stale"])

    outcome = delete_invoice(invoice_id)

    assert outcome == Ok("Deleted Invoice.")
    assert outcome.to_state() == {"message": "Deleted Invoice."}
    assert db.session.execute(
        db.select(db.func.count(Invoice.id)).where(Invoice.id == invoice_id)
    ).scalar_one() == 0
    assert "/dashboard/invoices" not in view_cache
    assert "/dashboard/customers" not in view_cache


def test_delete_missing_invoice_does_not_crash(app):
    assert delete_invoice("does-not-exist") == Ok("Deleted Invoice.")


def test_delete_invoice_storage_failure(invoice_id, monkeypatch):
    def lost_connection(*args, **kwargs):
        raise OperationalError("DELETE FROM invoices", {}, Exception("connection lost"))

    monkeypatch.setattr(db.session, "execute", lost_connection)

    outcome = delete_invoice(invoice_id)

    assert outcome == PersistenceFailed("Database Error: Failed to Delete Invoice.")
