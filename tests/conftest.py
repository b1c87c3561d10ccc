# Shared fixtures: an in-memory app per test, seed rows and SQL capture
from datetime import date

import pytest
from flask_jwt_extended import create_access_token
from sqlalchemy import event
from werkzeug.security import generate_password_hash

from dashboard import create_app, db, view_cache
from dashboard.config import TestingConfig
from dashboard.models import Customer, Invoice, User

PASSWORD = "correct-horse"


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
    view_cache.clear()


@pytest.fixture
def client(app):
    return app.test_client()


class CapturedSQL(list):
    def writes(self):
        return [
            s for s in self
            if s.lstrip().upper().startswith(("INSERT", "UPDATE", "DELETE"))
        ]


@pytest.fixture
def statements(app):
    """SQL statements sent to the database while the test runs."""
    captured = CapturedSQL()

    def capture(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    event.listen(db.engine, "before_cursor_execute", capture)
    yield captured
    event.remove(db.engine, "before_cursor_execute", capture)


@pytest.fixture
def customer_id(app):
    customer = Customer(name="Jane Doe", email="jane@x.com")
    db.session.add(customer)
    db.session.commit()
    return customer.id


@pytest.fixture
def invoice_id(app, customer_id):
    invoice = Invoice(customer_id=customer_id, amount=1250, status="pending", date=date(2024, 1, 15))
    db.session.add(invoice)
    db.session.commit()
    return invoice.id


@pytest.fixture
def user(app):
    user = User(
        name="Admin",
        email="admin@x.com",
        password_hash=generate_password_hash(PASSWORD, method=app.config["PASSWORD_HASH_METHOD"]),
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(identity=user.id)}"}
