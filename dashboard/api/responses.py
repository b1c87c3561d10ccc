"""
Turn form action outcomes into HTTP responses
"""

from flask import jsonify, redirect
from flask_jwt_extended import set_access_cookies

from dashboard.services.outcomes import Ok, PersistenceFailed, Redirect, ValidationFailed


def respond(outcome):
    if isinstance(outcome, Redirect):
        response = redirect(outcome.path, code=303)
        if outcome.access_token:
            set_access_cookies(response, outcome.access_token)
        return response

    if isinstance(outcome, ValidationFailed):
        return jsonify(outcome.to_state()), 422

    if isinstance(outcome, PersistenceFailed):
        return jsonify(outcome.to_state()), 500

    if isinstance(outcome, Ok):
        return jsonify(outcome.to_state()), 200

    raise TypeError(f"Unexpected form action outcome: {outcome!r}")
