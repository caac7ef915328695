"""
Admin Auth Routes
"""

import logging

from flask import jsonify, request, session

from pizzeria.auth import admin_bp
from pizzeria.auth.decorators import SESSION_TOKEN_KEY, admin_required
from pizzeria.errors import AuthError
from pizzeria.extensions import get_auth_gate

logger = logging.getLogger(__name__)


@admin_bp.route('/login', methods=['POST'])
def admin_login():
    """Check the admin credentials and start a one-hour admin session."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        new_session = get_auth_gate().login(data.get('username'), data.get('password'))
    except AuthError:
        logger.info('Admin login failed from %s', request.remote_addr)
        raise

    # Drop whatever the cookie carried before and bind it to the new session
    session.clear()
    session.permanent = True
    session[SESSION_TOKEN_KEY] = new_session.session_id
    logger.info('Admin login succeeded from %s', request.remote_addr)
    return jsonify(success=True)


@admin_bp.route('/logout', methods=['POST'])
def admin_logout():
    """Destroy the admin session and clear the cookie."""
    get_auth_gate().logout(session.get(SESSION_TOKEN_KEY))
    session.clear()
    return jsonify(success=True)


@admin_bp.route('/session')
@admin_required
def admin_session():
    return jsonify(admin=True)
