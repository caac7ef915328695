"""
Configuration settings for the Pizzeria backend

All values are supplied from the environment (or a local .env file) so the
same code runs in development, tests and production.
"""
import os
from datetime import timedelta

from dotenv import load_dotenv
from werkzeug.security import generate_password_hash

load_dotenv()

basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


def is_truthy(value):
    """Interpret an environment or query-string flag such as '1', 'true' or 'on'."""
    return value is not None and value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return is_truthy(value)


def _database_url():
    url = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'pizzeria.db')
    # Hosted Postgres providers hand out postgres:// URLs
    for prefix in ('postgres://', 'postgresql://'):
        if url.startswith(prefix):
            return 'postgresql+psycopg://' + url[len(prefix):]
    return url


def _allowed_origins():
    origins = ['http://localhost:3000']
    frontend = os.environ.get('FRONTEND_URL')
    if frontend:
        origins.append(frontend.rstrip('/'))
    return origins


class Config:
    """Flask application configuration"""

    ENV_NAME = 'development'

    # Signs the session cookie that carries the admin session token
    SECRET_KEY = os.environ.get('SESSION_SECRET') or os.environ.get('SECRET_KEY') or \
        'dev-secret-key-change-in-production'

    # Database configuration
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_TABLES = _env_flag('AUTO_CREATE_TABLES', True)

    # Cross-origin frontend
    CORS_ORIGINS = _allowed_origins()
    BEHIND_PROXY = _env_flag('BEHIND_PROXY', False)

    # Admin session cookie
    SESSION_LIFETIME_SECONDS = int(os.environ.get('SESSION_LIFETIME_SECONDS') or 3600)
    PERMANENT_SESSION_LIFETIME = timedelta(seconds=SESSION_LIFETIME_SECONDS)
    SESSION_REFRESH_EACH_REQUEST = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False

    # Admin credentials (single administrator, session-based)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'Owner'
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')
    # Development fallback only, hashed once at startup
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    # Lets customers settle an online order with the token issued at checkout
    PUBLIC_PAYMENT_CONFIRMATION = _env_flag('PUBLIC_PAYMENT_CONFIRMATION', True)

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class DevelopmentConfig(Config):
    """Local development configuration"""
    ADMIN_PASSWORD = Config.ADMIN_PASSWORD or 'admin123'


class ProductionConfig(Config):
    """Production configuration: the frontend lives on another site."""
    ENV_NAME = 'production'
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_SAMESITE = 'None'
    BEHIND_PROXY = _env_flag('BEHIND_PROXY', True)


class TestConfig(Config):
    """Testing configuration"""
    __test__ = False
    ENV_NAME = 'testing'
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    AUTO_CREATE_TABLES = True
    CORS_ORIGINS = ['http://localhost:3000']
    BEHIND_PROXY = False
    ADMIN_USERNAME = 'Owner'
    ADMIN_PASSWORD = None
    ADMIN_PASSWORD_HASH = generate_password_hash('test-password', method='pbkdf2:sha256:1000')
    PUBLIC_PAYMENT_CONFIRMATION = True
    LOG_LEVEL = 'WARNING'


_CONFIGS = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestConfig,
}


def config_for_env(name=None):
    """Return the configuration class for an APP_ENV value (default: development)."""
    name = (name or os.environ.get('APP_ENV') or 'development').strip().lower()
    try:
        return _CONFIGS[name]
    except KeyError:
        raise ValueError(f'Unknown APP_ENV {name!r}; expected one of {sorted(_CONFIGS)}') from None
