"""
Admin Auth Blueprint

Session-based login for the single administrator account.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from pizzeria.auth import routes  # noqa: E402, F401
