"""
Invoice model for amounts billed to customers
"""

from sqlalchemy import func, case
import uuid

from dashboard import db

INVOICE_STATUSES = ('pending', 'paid')

class Invoice(db.Model):
    """Invoice billed to a customer, amount stored in cents."""

    __tablename__ = 'invoices'

    # Primary key
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Foreign keys
    customer_id = db.Column(db.String(36), db.ForeignKey('customers.id'), nullable=False, index=True)

    # Financial information
    amount = db.Column(db.Integer, nullable=False)  # minor units
    status = db.Column(db.String(20), nullable=False, default='pending', index=True)
    date = db.Column(db.Date, nullable=False, index=True)

    # Indexes and constraints
    __table_args__ = (
        db.CheckConstraint("status IN ('pending', 'paid')", name='ck_invoice_status'),
        db.CheckConstraint('amount > 0', name='ck_invoice_amount_positive'),
        db.Index('idx_invoice_customer_date', 'customer_id', 'date'),
    )

    @classmethod
    def listing(cls):
        """Invoices joined with their customer, newest first."""
        from dashboard.models.customer import Customer

        rows = db.session.execute(
            db.select(
                cls.id,
                cls.amount,
                cls.status,
                cls.date,
                Customer.id.label('customer_id'),
                Customer.name,
                Customer.email,
                Customer.image_url
            )
            .join(Customer, cls.customer_id == Customer.id)
            .order_by(cls.date.desc(), cls.id)
        ).all()
        return [
            {**row._mapping, 'date': row.date.isoformat()}
            for row in rows
        ]

    @classmethod
    def totals(cls):
        """Invoice count and paid/pending sums in cents."""
        stats = db.session.execute(
            db.select(
                func.count(cls.id).label('count'),
                func.sum(case((cls.status == 'paid', cls.amount), else_=0)).label('paid'),
                func.sum(case((cls.status == 'pending', cls.amount), else_=0)).label('pending')
            )
        ).one()
        return {
            'count': stats.count or 0,
            'paid': stats.paid or 0,
            'pending': stats.pending or 0
        }

    def to_dict(self):
        """Convert invoice to dictionary for API responses."""
        return {
            'id': self.id,
            'customer_id': self.customer_id,
            'amount': self.amount,
            'status': self.status,
            'date': self.date.isoformat() if self.date else None
        }

    def __repr__(self):
        return f'<Invoice {self.id} {self.status}>'
