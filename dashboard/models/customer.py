"""
Customer model for billed customers
"""

from sqlalchemy import func, case
import uuid

from dashboard import db

class Customer(db.Model):
    """Customer billed by dashboard invoices."""

    __tablename__ = 'customers'

    # Primary key
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Basic customer information
    name = db.Column(db.String(255), nullable=False, index=True)
    email = db.Column(db.String(255), nullable=False, index=True)
    image_url = db.Column(db.String(500))

    # Relationships
    invoices = db.relationship('Invoice', backref='customer', lazy='dynamic')

    @classmethod
    def listing(cls):
        """Customers with their invoice count and paid/pending totals in cents."""
        from dashboard.models.invoice import Invoice

        total_pending = func.coalesce(
            func.sum(case((Invoice.status == 'pending', Invoice.amount), else_=0)), 0
        )
        total_paid = func.coalesce(
            func.sum(case((Invoice.status == 'paid', Invoice.amount), else_=0)), 0
        )
        rows = db.session.execute(
            db.select(
                cls.id,
                cls.name,
                cls.email,
                cls.image_url,
                func.count(Invoice.id).label('total_invoices'),
                total_pending.label('total_pending'),
                total_paid.label('total_paid')
            )
            .outerjoin(Invoice, Invoice.customer_id == cls.id)
            .group_by(cls.id, cls.name, cls.email, cls.image_url)
            .order_by(cls.name.asc())
        ).all()
        return [dict(row._mapping) for row in rows]

    @classmethod
    def choices(cls):
        """Id/name pairs for invoice form customer selects."""
        rows = db.session.execute(
            db.select(cls.id, cls.name).order_by(cls.name.asc())
        ).all()
        return [{'id': row.id, 'name': row.name} for row in rows]

    def to_dict(self):
        """Convert customer to dictionary for API responses."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'image_url': self.image_url
        }

    def __repr__(self):
        return f'<Customer {self.name}>'
