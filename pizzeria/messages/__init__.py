"""
Messages Blueprint

Contact form submissions.
"""

from flask import Blueprint

messages_bp = Blueprint('messages', __name__)

from pizzeria.messages import routes  # noqa: E402, F401
