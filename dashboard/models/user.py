"""
User model for dashboard authentication
"""

from datetime import datetime, timezone
from werkzeug.security import check_password_hash
import uuid

from dashboard import db

class User(db.Model):
    """Dashboard user signing in with email and password."""

    __tablename__ = 'users'

    # Primary key
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Profile information
    name = db.Column(db.String(255), nullable=False)

    # Authentication fields
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column('password', db.String(255), nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc),
                           nullable=False)

    def check_password(self, password):
        """Check password against hash."""
        return check_password_hash(self.password_hash, password)

    @classmethod
    def find_by_email(cls, email):
        return db.session.execute(
            db.select(cls).filter_by(email=email)
        ).scalar_one_or_none()

    def to_dict(self):
        """Convert user to dictionary for API responses."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<User {self.email}>'
