"""
Catalog Routes
"""

import logging

from flask import jsonify

from pizzeria.auth.decorators import admin_required
from pizzeria.catalog import catalog_bp
from pizzeria.errors import NotFoundError
from pizzeria.extensions import get_store
from pizzeria.validation import clean_text, get_json_body, parse_amount, require_fields

logger = logging.getLogger(__name__)


@catalog_bp.route('/pizzas')
def list_pizzas():
    """Public menu, ordered by id."""
    pizzas = get_store().list_pizzas().unwrap()
    return jsonify([pizza.to_dict() for pizza in pizzas])


@catalog_bp.route('/pizzas', methods=['POST'])
@admin_required
def add_pizza():
    data = get_json_body()
    require_fields(data, 'name', 'price', 'image')

    name = clean_text(data, 'name', max_length=100)
    pizza_id = get_store().add_pizza(
        name=name,
        price=parse_amount(data['price'], 'price'),
        image=clean_text(data, 'image'),
    ).unwrap()
    logger.info('Pizza %s (%s) added', pizza_id, name)
    return jsonify(success=True, id=pizza_id)


@catalog_bp.route('/pizzas/<int:pizza_id>', methods=['DELETE'])
@admin_required
def delete_pizza(pizza_id):
    if not get_store().delete_pizza(pizza_id).unwrap():
        raise NotFoundError('Pizza not found.')
    logger.info('Pizza %s deleted', pizza_id)
    return jsonify(success=True)
