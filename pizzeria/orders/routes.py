"""
Order Routes

Public checkout and payment confirmation, plus the admin order board.
"""

import logging
import secrets

from flask import current_app, jsonify, request

from pizzeria.auth.decorators import admin_required
from pizzeria.errors import NotFoundError, PaymentStateError, ValidationError
from pizzeria.extensions import get_store
from pizzeria.orders import orders_bp
from pizzeria.orders.lifecycle import PaymentStatus, initial_payment, parse_payment_status, transition
from pizzeria.validation import clean_text, get_json_body, parse_amount, require_fields

logger = logging.getLogger(__name__)


def _get_order_or_404(order_id):
    order = get_store().get_order(order_id).unwrap()
    if order is None:
        raise NotFoundError('Order not found.')
    return order


@orders_bp.route('/orders', methods=['POST'])
def create_order():
    """Place an order. Cash on delivery orders need no further payment step."""
    data = get_json_body()
    require_fields(data, 'name', 'phone', 'address', 'items', 'total', 'paymentMethod')

    items = data['items']
    if not isinstance(items, (list, dict)):
        raise ValidationError('items must be a list or an object.')
    total = parse_amount(data['total'], 'total')
    payment_method = clean_text(data, 'paymentMethod', max_length=50)
    initial = initial_payment(payment_method)

    order_id = get_store().create_order(
        name=clean_text(data, 'name', max_length=100),
        phone=clean_text(data, 'phone', max_length=20),
        address=clean_text(data, 'address'),
        items=items,
        total=total,
        payment_method=payment_method,
        payment_status=initial.status.value,
        confirmation_token=initial.confirmation_token,
    ).unwrap()
    logger.info('Order %s created with payment method %s (%s)',
                order_id, payment_method, initial.status.value)

    body = {'orderId': order_id, 'paymentRequired': initial.payment_required}
    if initial.confirmation_token:
        body['confirmationToken'] = initial.confirmation_token
    return jsonify(body)


@orders_bp.route('/orders')
@admin_required
def list_orders():
    """All orders, newest first."""
    orders = get_store().list_orders().unwrap()
    return jsonify([order.to_dict() for order in orders])


@orders_bp.route('/orders/<int:order_id>')
@admin_required
def get_order(order_id):
    return jsonify(_get_order_or_404(order_id).to_dict())


@orders_bp.route('/orders/<int:order_id>', methods=['PATCH'])
@admin_required
def update_order(order_id):
    """Update payment status, transaction id and/or fulfillment status.

    Payment status changes follow the order lifecycle; a paid order cannot
    be set back to Pending.
    """
    data = get_json_body()
    changes = {}
    target = None

    if 'paymentStatus' in data:
        target = parse_payment_status(data['paymentStatus'])
    if 'transactionId' in data:
        changes['transaction_id'] = clean_text(data, 'transactionId', max_length=100, required=False)
    if 'status' in data:
        changes['status'] = clean_text(data, 'status', max_length=50, required=False)

    if target is None and not changes:
        raise ValidationError('Provide at least one of: paymentStatus, transactionId, status.')

    store = get_store()
    order = _get_order_or_404(order_id)
    expected = None
    if target is not None:
        transition(order.payment_status, target)
        changes['payment_status'] = target.value
        expected = order.payment_status
        if target != PaymentStatus.PENDING:
            changes['confirmation_token'] = None

    if not store.update_order(order_id, changes, expected_payment_status=expected).unwrap():
        if expected is not None:
            raise PaymentStateError('Order payment status changed; reload and retry.')
        raise NotFoundError('Order not found.')

    if target is not None and target.value != expected:
        logger.info('Order %s payment status %s -> %s by admin', order_id, expected, target.value)
    return jsonify(success=True)


@orders_bp.route('/orders/<int:order_id>', methods=['DELETE'])
@admin_required
def delete_order(order_id):
    if not get_store().delete_order(order_id).unwrap():
        raise NotFoundError('Order not found.')
    logger.info('Order %s deleted by admin', order_id)
    return jsonify(success=True)


@orders_bp.route('/orders/<int:order_id>/confirm-payment', methods=['POST'])
@orders_bp.route('/confirm-payment/<int:order_id>', methods=['POST'])
def confirm_payment(order_id):
    """Customer-side payment confirmation for an online order.

    The caller must present the confirmation token handed out when the
    order was placed. An unknown order and a wrong token look the same
    (404). The transaction id is recorded as given; it is not checked with
    any payment provider.
    """
    if not current_app.config.get('PUBLIC_PAYMENT_CONFIRMATION'):
        raise NotFoundError()

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    token = data.get('confirmationToken')
    transaction_id = clean_text(data, 'transactionId', max_length=100, required=False) or 'N/A'

    store = get_store()
    order = store.get_order(order_id).unwrap()
    if (order is None or not order.confirmation_token or not isinstance(token, str)
            or not secrets.compare_digest(token.encode('utf-8'), order.confirmation_token.encode('utf-8'))):
        raise NotFoundError('Order not found.')

    transition(order.payment_status, PaymentStatus.PAID)
    changes = {
        'payment_status': PaymentStatus.PAID.value,
        'transaction_id': transaction_id,
        'confirmation_token': None,
    }
    if not store.update_order(order_id, changes, expected_payment_status=order.payment_status).unwrap():
        raise PaymentStateError('Order payment status changed; reload and retry.')

    logger.info('Order %s payment confirmed by customer', order_id)
    return jsonify(success=True)
