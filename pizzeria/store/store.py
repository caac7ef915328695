"""
Store

Thin query interface over the three tables. Each public method is one short
unit of work: it commits before returning, or rolls back and reports an
``Err`` if the database fails.
"""

import logging
from functools import wraps

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from pizzeria.models import Message, Order, Pizza
from pizzeria.store.result import Err, Ok, StoreFailure

logger = logging.getLogger(__name__)


def unit_of_work(operation):
    """Wrap a Store method so it returns Ok/Err instead of raising SQLAlchemyError."""
    def decorator(f):
        @wraps(f)
        def wrapper(self, *args, **kwargs):
            try:
                return Ok(f(self, *args, **kwargs))
            except SQLAlchemyError as e:
                self.session.rollback()
                logger.error('%s failed: %s', operation, e.__class__.__name__, exc_info=True)
                return Err(StoreFailure(operation, str(e)))
        return wrapper
    return decorator


class Store:
    """Persistence collaborator backed by a Flask-SQLAlchemy instance."""

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    @unit_of_work('ping')
    def ping(self):
        self.session.execute(text('SELECT 1'))
        return True

    # Pizzas

    @unit_of_work('list pizzas')
    def list_pizzas(self):
        return Pizza.query.order_by(Pizza.id).all()

    @unit_of_work('add pizza')
    def add_pizza(self, name, price, image):
        pizza = Pizza(name=name, price=price, image=image)
        self.session.add(pizza)
        self.session.commit()
        return pizza.id

    @unit_of_work('delete pizza')
    def delete_pizza(self, pizza_id):
        deleted = Pizza.query.filter_by(id=pizza_id).delete()
        self.session.commit()
        return deleted > 0

    # Orders

    @unit_of_work('list orders')
    def list_orders(self):
        return Order.query.order_by(Order.created_at.desc(), Order.id.desc()).all()

    @unit_of_work('get order')
    def get_order(self, order_id):
        return self.session.get(Order, order_id)

    @unit_of_work('create order')
    def create_order(self, name, phone, address, items, total, payment_method,
                     payment_status, confirmation_token=None):
        order = Order(
            name=name,
            phone=phone,
            address=address,
            items=items,
            total=total,
            payment_method=payment_method,
            payment_status=payment_status,
            confirmation_token=confirmation_token,
        )
        self.session.add(order)
        self.session.commit()
        return order.id

    @unit_of_work('update order')
    def update_order(self, order_id, changes, expected_payment_status=None):
        """Apply ``changes`` (column name -> value) to one order.

        When ``expected_payment_status`` is given the row is only updated if
        its payment status still has that value. Returns whether a row
        changed.
        """
        query = Order.query.filter_by(id=order_id)
        if expected_payment_status is not None:
            query = query.filter_by(payment_status=expected_payment_status)
        updated = query.update(changes, synchronize_session=False)
        self.session.commit()
        return updated > 0

    @unit_of_work('delete order')
    def delete_order(self, order_id):
        deleted = Order.query.filter_by(id=order_id).delete()
        self.session.commit()
        return deleted > 0

    # Messages

    @unit_of_work('list messages')
    def list_messages(self):
        return Message.query.order_by(Message.created_at.desc(), Message.id.desc()).all()

    @unit_of_work('add message')
    def add_message(self, name, email, message):
        record = Message(name=name, email=email, message=message)
        self.session.add(record)
        self.session.commit()
        return record.id

    @unit_of_work('delete message')
    def delete_message(self, message_id):
        deleted = Message.query.filter_by(id=message_id).delete()
        self.session.commit()
        return deleted > 0
