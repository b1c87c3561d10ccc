"""
Authentication endpoints
Handles sign-up, login and logout for dashboard sessions
"""

from flask import Blueprint, current_app, jsonify, redirect, request, url_for
from flask_jwt_extended import unset_jwt_cookies
import logging

from dashboard import limiter
from dashboard.api.responses import respond
from dashboard.services import authenticate, create_user

auth_bp = Blueprint('auth', __name__)
logger = logging.getLogger(__name__)


def login_rate_limit():
    return current_app.config.get('RATELIMIT_LOGIN', '10 per minute')


def signup_rate_limit():
    return current_app.config.get('RATELIMIT_SIGNUP', '5 per minute')


@auth_bp.route('/login', methods=['GET'])
def login():
    """Login form target; clients post credentials here."""
    return jsonify({'message': 'Please log in to continue.'}), 200


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(login_rate_limit)
def login_submit():
    """Authenticate credentials and start a session."""
    outcome = authenticate(request.form)

    if isinstance(outcome, str):
        logger.info(f"Login rejected: {outcome}")
        return jsonify({'message': outcome}), 401

    return respond(outcome)


@auth_bp.route('/signup', methods=['POST'])
@limiter.limit(signup_rate_limit)
def signup():
    """Register a user and sign them in."""
    return respond(create_user(request.form))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """End the session by clearing the session cookies."""
    response = redirect(url_for('auth.login'), code=303)
    unset_jwt_cookies(response)
    return response
