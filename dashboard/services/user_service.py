"""
User sign-up form action
"""

import logging

from flask import current_app
from sqlalchemy import insert
from werkzeug.security import generate_password_hash

from dashboard import schemas
from dashboard.models.user import User
from dashboard.services.auth_service import authenticate
from dashboard.services.mutation import (
    DASHBOARD_PATH, execute_one, invalidate, validation_failed
)
from dashboard.services.outcomes import Redirect

logger = logging.getLogger(__name__)


def create_user(form):
    """Register a user, sign them in with the same submission and go to the dashboard."""
    result = schemas.CreateUser.from_form(form)
    if not result.success:
        return validation_failed(result.errors, 'Create', 'User')

    fields = result.data
    password_hash = generate_password_hash(
        fields.password,
        method=current_app.config['PASSWORD_HASH_METHOD']
    )

    failure = execute_one(
        insert(User).values(
            name=fields.name,
            email=fields.email,
            password_hash=password_hash
        ),
        'Create', 'User'
    )
    if failure:
        return failure

    logger.info(f"New user registered: {fields.email}")

    signed_in = authenticate(form)
    if isinstance(signed_in, Redirect):
        access_token = signed_in.access_token
    else:
        logger.warning(f"Sign-in after registration failed for {fields.email}: {signed_in}")
        access_token = None

    invalidate(DASHBOARD_PATH)
    return Redirect(DASHBOARD_PATH, access_token=access_token)
