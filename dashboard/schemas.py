"""
Form schemas for dashboard submissions

Each (entity, operation) pair has its own declared input struct. Server
generated fields (ids, invoice dates, user timestamps) only appear on the
full record schemas, so create/update structs can never accept them.
"""

from dataclasses import dataclass, field
import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator

FieldErrors = Dict[str, List[str]]

CUSTOMER_MESSAGE = 'Please select a customer.'
AMOUNT_MESSAGE = 'Please enter an amount greater than $0.'
STATUS_MESSAGE = 'Please select an invoice status.'
NAME_MESSAGE = 'Please enter your full name.'
EMAIL_MESSAGE = 'Please enter a valid email address.'


class FormSchema(BaseModel):
    """Base for schemas validated from raw form submissions."""

    model_config = ConfigDict(extra='ignore')

    # form key -> message replacing any violation of that field
    error_messages: ClassVar[Dict[str, str]] = {}

    @classmethod
    def form_keys(cls) -> List[str]:
        return [info.alias or name for name, info in cls.model_fields.items()]

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> 'ValidationResult':
        """Pull this schema's keys out of ``form`` and validate them."""
        raw = {key: form.get(key) for key in cls.form_keys()}
        try:
            return ValidationResult(data=cls.model_validate(raw))
        except ValidationError as exc:
            return ValidationResult(errors=cls._flatten(exc))

    @classmethod
    def _flatten(cls, exc: ValidationError) -> FieldErrors:
        errors: FieldErrors = {}
        for error in exc.errors():
            key = str(error['loc'][0]) if error['loc'] else '__root__'
            message = cls.error_messages.get(key, error['msg'])
            messages = errors.setdefault(key, [])
            if message not in messages:
                messages.append(message)
        return errors


@dataclass
class ValidationResult:
    data: Optional[FormSchema] = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors


# Invoices

class InvoiceFields(FormSchema):
    customer_id: str = Field(alias='customerId', min_length=1)
    # Stored in whole cents
    amount: Decimal = Field(gt=0, decimal_places=2)
    status: Literal['pending', 'paid']

    error_messages: ClassVar[Dict[str, str]] = {
        'customerId': CUSTOMER_MESSAGE,
        'amount': AMOUNT_MESSAGE,
        'status': STATUS_MESSAGE,
    }

    @property
    def amount_in_cents(self) -> int:
        return int(self.amount * 100)


class Invoice(InvoiceFields):
    id: str
    date: datetime.date


class CreateInvoice(InvoiceFields):
    pass


class UpdateInvoice(InvoiceFields):
    pass


# Customers

class CustomerFields(FormSchema):
    name: str = Field(min_length=4)
    email: EmailStr
    image: Optional[str] = None

    error_messages: ClassVar[Dict[str, str]] = {
        'name': NAME_MESSAGE,
        'email': EMAIL_MESSAGE,
    }

    @field_validator('image', mode='before')
    @classmethod
    def blank_image_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Customer(CustomerFields):
    id: str


class CreateCustomer(CustomerFields):
    pass


class UpdateCustomer(CustomerFields):
    pass


# Users

class UserFields(FormSchema):
    name: str
    email: EmailStr
    password: str = Field(min_length=8)

    error_messages: ClassVar[Dict[str, str]] = {
        'email': EMAIL_MESSAGE,
    }


class User(UserFields):
    id: str
    created_at: datetime.datetime


class CreateUser(UserFields):
    pass


class Credentials(FormSchema):
    email: EmailStr
    password: str = Field(min_length=8)


SCHEMAS = {
    schema.__name__: schema
    for schema in (
        Invoice, CreateInvoice, UpdateInvoice,
        Customer, CreateCustomer, UpdateCustomer,
        User, CreateUser, Credentials,
    )
}


def validate(schema_name: str, raw_fields: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw submission against the schema registered as ``schema_name``."""
    try:
        schema = SCHEMAS[schema_name]
    except KeyError:
        raise ValueError(f"Unknown form schema: {schema_name}") from None
    return schema.from_form(raw_fields)
