"""
Identity provider for dashboard sign-in

Providers exchange submitted credentials for a session. Failures inside the
sign-in flow are raised as AuthError subclasses carrying a ``type``; anything
else (bad configuration, programming errors) propagates untouched.
"""

import logging
from dataclasses import dataclass

from flask_jwt_extended import create_access_token
from sqlalchemy.exc import SQLAlchemyError

from dashboard import schemas
from dashboard.models.user import User

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for failures of the sign-in flow."""
    type = 'AuthError'

    def __init__(self, message=None):
        super().__init__(message or self.type)


class CredentialsSignin(AuthError):
    """Submitted credentials did not match a user."""
    type = 'CredentialsSignin'


class CallbackRouteError(AuthError):
    """The provider failed while authorizing the credentials."""
    type = 'CallbackRouteError'


@dataclass(frozen=True)
class Session:
    user_id: str
    access_token: str


class CredentialsProvider:
    """Email and password sign-in against the users table."""

    name = 'credentials'

    def authorize(self, credentials):
        """Return the user matching ``credentials`` or None."""
        result = schemas.Credentials.from_form(credentials)
        if not result.success:
            return None

        try:
            user = User.find_by_email(result.data.email)
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed during sign-in: {str(e)}")
            raise CallbackRouteError('Could not look up user') from e

        if user and user.check_password(result.data.password):
            return user
        return None


PROVIDERS = {
    CredentialsProvider.name: CredentialsProvider(),
}


def sign_in(provider_name, credentials):
    """
    Authenticate ``credentials`` with the named provider.

    Returns:
        Session for the signed-in user

    Raises:
        CredentialsSignin: credentials were invalid or unknown
        CallbackRouteError: the provider could not complete authorization
        ValueError: no provider is registered under ``provider_name``
    """
    provider = PROVIDERS.get(provider_name)
    if provider is None:
        raise ValueError(f"Unknown identity provider: {provider_name}")

    user = provider.authorize(credentials)
    if user is None:
        raise CredentialsSignin()

    token = create_access_token(
        identity=user.id,
        additional_claims={'name': user.name, 'email': user.email}
    )
    logger.info(f"User signed in: {user.email}")
    return Session(user_id=user.id, access_token=token)
