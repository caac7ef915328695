"""
Health Check Routes
"""

from flask import jsonify, request

from pizzeria.config import is_truthy
from pizzeria.extensions import get_store
from pizzeria.health import health_bp


@health_bp.route('/health')
def health():
    """Liveness check; ``?deep=1`` also pings the database."""
    if is_truthy(request.args.get('deep')):
        if not get_store().ping().ok:
            return jsonify(status='degraded'), 503
    return jsonify(status='ok')
