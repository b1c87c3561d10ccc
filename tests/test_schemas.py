# Form schema unit tests (no database)
import pytest
from werkzeug.datastructures import MultiDict

from dashboard import schemas


def test_invoice_amount_converted_to_cents():
    result = schemas.validate("CreateInvoice", {"customerId": "c1", "amount": "12.50", "status": "pending"})
    assert result.success
    assert result.data.customer_id == "c1"
    assert result.data.amount_in_cents == 1250


def test_invoice_amount_must_be_positive():
    for amount in ("0", "-5", "", "abc", None):
        result = schemas.validate("CreateInvoice", {"customerId": "c1", "amount": amount, "status": "paid"})
        assert result.errors == {"amount": ["Please enter an amount greater than $0."]}


def test_invoice_amount_below_a_cent_is_rejected():
    for amount in ("0.001", "12.555"):
        result = schemas.validate("CreateInvoice", {"customerId": "c1", "amount": amount, "status": "paid"})
        assert result.errors == {"amount": ["Please enter an amount greater than $0."]}

    result = schemas.validate("CreateInvoice", {"customerId": "c1", "amount": "0.01", "status": "paid"})
    assert result.data.amount_in_cents == 1


def test_invoice_missing_fields_report_each_field():
    result = schemas.validate("UpdateInvoice", {})
    assert result.errors == {
        "customerId": ["Please select a customer."],
        "amount": ["Please enter an amount greater than $0."],
        "status": ["Please select an invoice status."],
    }


def test_invoice_status_and_customer_rules():
    result = schemas.validate("CreateInvoice", {"customerId": "", "amount": "3", "status": "overdue"})
    assert result.errors == {
        "customerId": ["Please select a customer."],
        "status": ["Please select an invoice status."],
    }


def test_create_invoice_ignores_server_generated_fields():
    form = {"id": "x", "date": "1999-01-01", "customerId": "c1", "amount": "1", "status": "paid", "extra": "y"}
    result = schemas.validate("CreateInvoice", form)
    assert result.success
    assert set(result.data.model_dump()) == {"customer_id", "amount", "status"}


def test_full_invoice_schema_requires_id_and_date():
    result = schemas.validate("Invoice", {"customerId": "c1", "amount": "1", "status": "paid"})
    assert set(result.errors) == {"id", "date"}


def test_customer_name_too_short():
    result = schemas.validate("CreateCustomer", {"name": "Jo", "email": "jo@x.com"})
    assert result.errors == {"name": ["Please enter your full name."]}


def test_customer_invalid_email():
    result = schemas.validate("UpdateCustomer", {"name": "Jane Doe", "email": "not-an-email"})
    assert result.errors == {"email": ["Please enter a valid email address."]}


def test_customer_image_optional():
    result = schemas.validate("CreateCustomer", {"name": "Jane Doe", "email": "jane@x.com", "image": "  "})
    assert result.success
    assert result.data.image is None

    result = schemas.validate(
        "CreateCustomer",
        {"name": "Jane Doe", "email": "jane@x.com", "image": "/customers/jane.png"},
    )
    assert result.data.image == "/customers/jane.png"


def test_user_password_minimum_length_uses_default_message():
    result = schemas.validate("CreateUser", {"name": "Ann", "email": "ann@x.com", "password": "short"})
    assert list(result.errors) == ["password"]
    assert len(result.errors["password"]) == 1
    assert "8" in result.errors["password"][0]


def test_multidict_submission():
    form = MultiDict([("customerId", "c1"), ("amount", "7"), ("status", "paid"), ("status", "pending")])
    result = schemas.validate("CreateInvoice", form)
    assert result.success
    assert result.data.status == "paid"


def test_unknown_schema():
    with pytest.raises(ValueError):
        schemas.validate("Nope", {})
