"""
Invoice Dashboard
Flask application for managing invoices, customers and users
"""

import sqlite3
import logging
from flask import Flask, jsonify, redirect, request, url_for
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
import structlog
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

from dashboard.cache import ViewCache
from dashboard.config import Config

# Initialize extensions
db = SQLAlchemy()
jwt = JWTManager()
cors = CORS()
limiter = Limiter(key_func=get_remote_address)
migrate = Migrate()
view_cache = ViewCache()

@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked per connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

def create_app(config_class=Config):
    """Application factory pattern for creating Flask app."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    # Initialize Sentry for error tracking
    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[
                FlaskIntegration(),
                SqlalchemyIntegration(),
            ],
            traces_sample_rate=1.0,
            environment=app.config.get('FLASK_ENV', 'production')
        )

    # Setup structured logging
    setup_logging(app)

    # Initialize extensions
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(app)
    limiter.init_app(app)
    migrate.init_app(app, db)
    view_cache.init_app(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)
    register_session_handlers(app)

    # Register security headers
    register_security_headers(app)

    # Register health check
    register_health_check(app)

    return app

def setup_logging(app):
    """Configure structured logging."""
    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'))

    if app.config.get('LOG_FORMAT') == 'json':
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=log_level)

def register_blueprints(app):
    """Register all application blueprints."""
    from dashboard.api.auth import auth_bp
    from dashboard.api.dashboard_routes import dashboard_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp, url_prefix='/dashboard')

ERROR_MESSAGES = {
    400: 'The submitted form could not be read',
    404: 'No such dashboard page or record',
    405: 'This page does not accept that method',
    429: 'Too many attempts. Please try again later.',
    500: 'An unexpected error occurred',
}

def register_error_handlers(app):
    """Answer framework errors with a JSON body instead of an HTML page."""

    def handle(error):
        if error.code >= 500:
            app.logger.error(f'Internal server error: {str(error)}')
        return jsonify({
            'error': error.name,
            'message': ERROR_MESSAGES[error.code],
            'status_code': error.code
        }), error.code

    for code in ERROR_MESSAGES:
        app.register_error_handler(code, handle)

def register_session_handlers(app):
    """Send visitors without a valid session to the login page."""

    @jwt.unauthorized_loader
    def missing_session(reason):
        return redirect(url_for('auth.login'))

    @jwt.invalid_token_loader
    def invalid_session(reason):
        return redirect(url_for('auth.login'))

    @jwt.expired_token_loader
    def expired_session(jwt_header, jwt_payload):
        return redirect(url_for('auth.login'))

def register_security_headers(app):
    """Add security headers to all responses."""
    request_logger = structlog.get_logger('dashboard.request')

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'

        # HTTPS enforcement
        if app.config.get('SECURE_SSL_REDIRECT'):
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        response.headers['Content-Security-Policy'] = "default-src 'self'"
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        request_logger.info(
            'request',
            method=request.method,
            path=request.path,
            status=response.status_code
        )
        return response

def register_health_check(app):
    """Register health check endpoint."""

    @app.route('/health')
    def health_check():
        """Health check endpoint for load balancers and monitoring."""
        try:
            db.session.execute(text('SELECT 1'))
            db_status = 'healthy'
        except Exception as e:
            app.logger.error(f'Database health check failed: {str(e)}')
            db_status = 'unhealthy'

        health_data = {
            'status': 'healthy' if db_status == 'healthy' else 'unhealthy',
            'services': {
                'database': db_status,
                'application': 'healthy'
            },
            'version': '1.0.0'
        }

        status_code = 200 if health_data['status'] == 'healthy' else 503
        return jsonify(health_data), status_code
