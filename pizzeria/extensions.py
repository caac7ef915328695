"""
Flask Extensions and service handles

The store, session store and auth gate are built by the application factory
and kept on ``app.extensions``; handlers reach them through the accessors
below rather than through module globals.
"""

from flask import current_app
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()

# Cross-origin access for the storefront and admin frontends
cors = CORS()

STORE_KEY = 'pizzeria.store'
SESSION_STORE_KEY = 'pizzeria.session_store'
AUTH_GATE_KEY = 'pizzeria.auth_gate'


def get_store():
    return current_app.extensions[STORE_KEY]


def get_session_store():
    return current_app.extensions[SESSION_STORE_KEY]


def get_auth_gate():
    return current_app.extensions[AUTH_GATE_KEY]
