#!/usr/bin/env python3
"""
Database setup script for the Invoice Dashboard
Creates tables, the first user, and optional sample data
"""

import os
import sys
from datetime import date, timedelta

# Add parent directory to path to import dashboard
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash

from dashboard import create_app, db
from dashboard.config import config
from dashboard.models import User, Customer, Invoice

def create_database():
    """Create all database tables."""
    print("Creating database tables...")

    try:
        db.create_all()
        print("✅ Database tables created successfully")
        return True

    except SQLAlchemyError as e:
        print(f"❌ Error creating database: {str(e)}")
        return False

def create_admin_user(password_method):
    """Create the first dashboard user."""
    print("\nCreating admin user...")

    existing = db.session.execute(db.select(User).limit(1)).scalar_one_or_none()
    if existing:
        print(f"✅ A user already exists: {existing.email}")
        return existing

    email = input("Enter admin email: ").strip()
    if not email:
        print("❌ Email is required")
        return None

    password = input("Enter admin password (min 8 characters): ").strip()
    if len(password) < 8:
        print("❌ Password must be at least 8 characters")
        return None

    name = input("Enter name: ").strip() or "Admin"

    try:
        admin = User(
            name=name,
            email=email,
            password_hash=generate_password_hash(password, method=password_method)
        )
        db.session.add(admin)
        db.session.commit()

        print("✅ Admin user created successfully!")
        print(f"   Email: {admin.email}")
        return admin

    except SQLAlchemyError as e:
        print(f"❌ Error creating admin user: {str(e)}")
        db.session.rollback()
        return None

def create_sample_data():
    """Create sample customers and invoices."""
    print("\nDo you want to create sample data for testing? (y/N): ", end="")
    choice = input().strip().lower()

    if choice != 'y':
        print("Skipping sample data creation")
        return

    print("Creating sample data...")

    try:
        evil_rabbit = Customer(name="Evil Rabbit", email="evil@rabbit.com")
        delba = Customer(name="Delba de Oliveira", email="delba@oliveira.com")
        db.session.add_all([evil_rabbit, delba])
        db.session.flush()

        today = date.today()
        db.session.add_all([
            Invoice(customer_id=evil_rabbit.id, amount=15795, status='pending', date=today - timedelta(days=3)),
            Invoice(customer_id=delba.id, amount=20348, status='pending', date=today - timedelta(days=10)),
            Invoice(customer_id=delba.id, amount=3040, status='paid', date=today - timedelta(days=40)),
        ])
        db.session.commit()

        print("✅ Sample data created successfully")

    except SQLAlchemyError as e:
        print(f"❌ Error creating sample data: {str(e)}")
        db.session.rollback()

def check_database_health():
    """Check database connectivity and basic operations."""
    print("\nChecking database health...")

    try:
        user_count = db.session.execute(db.select(db.func.count(User.id))).scalar_one()
        customer_count = db.session.execute(db.select(db.func.count(Customer.id))).scalar_one()
        invoice_count = db.session.execute(db.select(db.func.count(Invoice.id))).scalar_one()

        print("✅ Database connection successful")
        print(f"   Users: {user_count}")
        print(f"   Customers: {customer_count}")
        print(f"   Invoices: {invoice_count}")

        return True

    except SQLAlchemyError as e:
        print(f"❌ Database health check failed: {str(e)}")
        return False

def main():
    """Main setup function."""
    print("🚀 Invoice Dashboard - Database Setup")
    print("=" * 50)

    app = create_app(config[os.environ.get('FLASK_CONFIG', 'default')])

    with app.app_context():
        if not create_database():
            print("❌ Setup failed at database creation step")
            return False

        if not create_admin_user(app.config['PASSWORD_HASH_METHOD']):
            print("❌ Setup failed at admin user creation step")
            return False

        create_sample_data()

        if not check_database_health():
            print("❌ Setup failed at health check step")
            return False

        print("\n" + "=" * 50)
        print("🎉 Database setup completed successfully!")
        print("\nNext steps:")
        print("1. Start the application: python app.py")
        print("2. Log in at /login with the admin credentials")

        return True

if __name__ == "__main__":
    sys.exit(0 if main() else 1)
