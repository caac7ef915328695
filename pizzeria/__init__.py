"""
Pizzeria Backend - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix

from pizzeria.config import config_for_env
from pizzeria.errors import ApiError
from pizzeria.extensions import AUTH_GATE_KEY, SESSION_STORE_KEY, STORE_KEY, cors, db

logger = logging.getLogger(__name__)


def create_app(config_class=None, store=None, session_store=None, identity=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: picked from APP_ENV)
        store: Persistence collaborator (default: Store over the app database)
        session_store: Admin session store (default: in-process SessionStore)
        identity: AdministratorIdentity (default: built from configuration)

    Returns:
        Configured Flask application instance
    """
    from pizzeria.auth.gate import AuthGate
    from pizzeria.auth.identity import AdministratorIdentity
    from pizzeria.auth.sessions import SessionStore
    from pizzeria.store import Store

    app = Flask(__name__)
    app.config.from_object(config_class or config_for_env())
    _configure_logging(app)

    if app.config.get('BEHIND_PROXY'):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)

    # Service handles
    if session_store is None:
        session_store = SessionStore(lifetime=app.config['PERMANENT_SESSION_LIFETIME'])
    if identity is None:
        identity = AdministratorIdentity.from_config(app.config)
    app.extensions[STORE_KEY] = store if store is not None else Store(db)
    app.extensions[SESSION_STORE_KEY] = session_store
    app.extensions[AUTH_GATE_KEY] = AuthGate(identity, session_store)

    # Register blueprints
    from pizzeria.auth import admin_bp
    from pizzeria.catalog import catalog_bp
    from pizzeria.health import health_bp
    from pizzeria.messages import messages_bp
    from pizzeria.orders import orders_bp

    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(catalog_bp, url_prefix='/api')
    app.register_blueprint(orders_bp, url_prefix='/api')
    app.register_blueprint(messages_bp, url_prefix='/api')
    app.register_blueprint(health_bp)

    _register_error_handlers(app)

    # Create database tables
    if app.config.get('AUTO_CREATE_TABLES'):
        with app.app_context():
            import pizzeria.models  # noqa: F401
            uri = app.config['SQLALCHEMY_DATABASE_URI']
            if uri.startswith('sqlite:///'):
                db_dir = os.path.dirname(uri[len('sqlite:///'):])
                if db_dir:
                    os.makedirs(db_dir, exist_ok=True)
            db.create_all()

    logger.info('Pizzeria backend ready (%s, origins: %s)',
                app.config.get('ENV_NAME'), ', '.join(app.config['CORS_ORIGINS']))
    return app


def _configure_logging(app):
    """Set up root logging once from LOG_LEVEL."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        )
    logging.getLogger('pizzeria').setLevel(level)


def _register_error_handlers(app):
    """Answer every error with the same JSON shape."""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        body = {
            'success': False,
            'error': error.name.lower().replace(' ', '_'),
            'message': error.description,
        }
        return jsonify(body), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error on %s %s', request.method, request.path)
        return jsonify(ApiError().to_dict()), 500
