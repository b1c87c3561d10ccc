"""
Configuration management for the Invoice Dashboard
Supports multiple environments with secure defaults
"""

import os
from datetime import timedelta
from dotenv import load_dotenv

# Load environment variables
basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))

class Config:
    """Base configuration class with common settings."""

    # Flask Core Settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    FLASK_ENV = os.environ.get('FLASK_ENV') or 'production'

    # Database Configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{os.path.join(basedir, "dashboard.db")}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }

    # Session (JWT) Configuration
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        seconds=int(os.environ.get('JWT_ACCESS_TOKEN_EXPIRES', 3600))
    )
    JWT_TOKEN_LOCATION = ['cookies', 'headers']
    JWT_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'True').lower() == 'true'
    JWT_COOKIE_SAMESITE = 'Lax'
    # HTML forms cannot set headers, so the CSRF token travels as a form field
    JWT_CSRF_CHECK_FORM = True

    # Password hashing (werkzeug method string, cost factor included)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'scrypt:32768:8:1')

    # View cache
    CACHE_TTL = int(os.environ.get('CACHE_TTL', 300))

    # Rate Limiting Configuration
    RATELIMIT_STORAGE_URI = os.environ.get('RATE_LIMIT_STORAGE_URL') or 'memory://'
    RATELIMIT_DEFAULT = os.environ.get('DEFAULT_RATE_LIMIT', '200 per hour')
    RATELIMIT_LOGIN = os.environ.get('LOGIN_RATE_LIMIT', '10 per minute')
    RATELIMIT_SIGNUP = os.environ.get('SIGNUP_RATE_LIMIT', '5 per minute')

    # CORS Configuration
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    # Security Configuration
    SECURE_SSL_REDIRECT = os.environ.get('SECURE_SSL_REDIRECT', 'False').lower() == 'true'
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'True').lower() == 'true'
    SESSION_COOKIE_HTTPONLY = True

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.environ.get('LOG_FORMAT', 'json')
    SENTRY_DSN = os.environ.get('SENTRY_DSN')

    @staticmethod
    def init_app(app):
        """Initialize application with configuration."""
        pass

class DevelopmentConfig(Config):
    """Development environment configuration."""
    DEBUG = True
    FLASK_ENV = 'development'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or \
        f'sqlite:///{os.path.join(basedir, "dev_dashboard.db")}'
    SECURE_SSL_REDIRECT = False
    SESSION_COOKIE_SECURE = False
    JWT_COOKIE_SECURE = False
    LOG_FORMAT = os.environ.get('LOG_FORMAT', 'console')

class TestingConfig(Config):
    """Testing environment configuration."""
    TESTING = True
    FLASK_ENV = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(seconds=300)  # 5 minutes for tests
    JWT_COOKIE_SECURE = False
    JWT_COOKIE_CSRF_PROTECT = False
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'  # fast hashing for tests
    RATELIMIT_ENABLED = False
    SECURE_SSL_REDIRECT = False
    SESSION_COOKIE_SECURE = False
    LOG_FORMAT = 'console'
    SENTRY_DSN = None

class ProductionConfig(Config):
    """Production environment configuration."""
    DEBUG = False
    TESTING = False
    FLASK_ENV = 'production'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_size': int(os.environ.get('DATABASE_POOL_SIZE', 20)),
        'pool_timeout': 20,
        'pool_recycle': 3600,
        'max_overflow': int(os.environ.get('DATABASE_MAX_OVERFLOW', 10))
    }

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Log to syslog in production
        import logging
        from logging.handlers import SysLogHandler
        syslog_handler = SysLogHandler()
        syslog_handler.setLevel(logging.WARNING)
        app.logger.addHandler(syslog_handler)

# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
