"""
Shared steps of the validate, persist, invalidate pipeline
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from dashboard import db, view_cache
from dashboard.services.outcomes import PersistenceFailed, ValidationFailed

logger = logging.getLogger(__name__)

DASHBOARD_PATH = '/dashboard'
INVOICES_PATH = '/dashboard/invoices'
CUSTOMERS_PATH = '/dashboard/customers'


def validation_failed(errors, verb, entity):
    return ValidationFailed(
        errors=errors,
        message=f'Missing Fields. Failed to {verb} {entity}.'
    )


def execute_one(statement, verb, entity):
    """
    Run one write statement and commit it.

    Returns None on success or a PersistenceFailed outcome. Storage errors
    are logged and rolled back; they never reach the caller.
    """
    try:
        db.session.execute(statement)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Failed to {verb.lower()} {entity.lower()}: {str(e)}")
        return PersistenceFailed(message=f'Database Error: Failed to {verb} {entity}.')
    return None


def invalidate(*paths):
    for path in paths:
        view_cache.invalidate(path)
