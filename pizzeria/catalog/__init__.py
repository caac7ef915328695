"""
Catalog Blueprint

Public pizza menu and its admin management.
"""

from flask import Blueprint

catalog_bp = Blueprint('catalog', __name__)

from pizzeria.catalog import routes  # noqa: E402, F401
