"""
Authentication form action
"""

from urllib.parse import urlsplit

from dashboard.services import identity_provider
from dashboard.services.identity_provider import AuthError
from dashboard.services.mutation import DASHBOARD_PATH
from dashboard.services.outcomes import Redirect

AUTH_ERROR_MESSAGES = {
    'CredentialsSignin': 'Invalid credentials.',
}
DEFAULT_AUTH_ERROR_MESSAGE = 'Something went wrong.'


def _local_path(target):
    # Browsers read a backslash as a slash, so "/\host" leaves the site
    if not target or not target.startswith('/') or '\\' in target:
        return DASHBOARD_PATH
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return DASHBOARD_PATH
    return target


def authenticate(form):
    """
    Sign in with the email/password carried in ``form``.

    Returns a Redirect carrying the new session token, or a user-facing
    message when the identity provider rejects the attempt. Errors outside
    the sign-in flow are re-raised.
    """
    try:
        session = identity_provider.sign_in('credentials', form)
    except AuthError as error:
        return AUTH_ERROR_MESSAGES.get(error.type, DEFAULT_AUTH_ERROR_MESSAGE)

    return Redirect(_local_path(form.get('redirectTo')), access_token=session.access_token)
