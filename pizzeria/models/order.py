"""
Order Model
"""

import json
import logging

from pizzeria.extensions import db

logger = logging.getLogger(__name__)


def decode_items(items):
    """Return the stored items blob as a structured value.

    Some drivers hand JSON columns back as text; those are decoded here so
    API consumers always receive a list or object.
    """
    if isinstance(items, (bytes, bytearray)):
        items = items.decode('utf-8')
    if isinstance(items, str):
        try:
            return json.loads(items)
        except ValueError:
            logger.warning('Order items blob is not valid JSON; returning null')
            return None
    return items


class Order(db.Model):
    """Customer order with its payment and fulfillment state"""
    __tablename__ = 'orders'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100))
    phone = db.Column(db.String(20))
    address = db.Column(db.Text)
    items = db.Column(db.JSON)
    total = db.Column(db.Numeric(10, 2))
    payment_method = db.Column(db.String(50))
    payment_status = db.Column(db.String(20))
    transaction_id = db.Column(db.String(100))
    # Fulfillment label, free-form
    status = db.Column(db.String(50))
    # Issued to the customer for online orders; cleared once payment settles
    confirmation_token = db.Column(db.String(64))
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp(), index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'phone': self.phone,
            'address': self.address,
            'items': decode_items(self.items),
            'total': float(self.total) if self.total is not None else None,
            'paymentMethod': self.payment_method,
            'paymentStatus': self.payment_status,
            'transactionId': self.transaction_id,
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Order {self.id} {self.payment_status}>'
