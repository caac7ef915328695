"""
Models Package

Exports all models for easy importing.
"""

from pizzeria.models.pizza import Pizza
from pizzeria.models.order import Order
from pizzeria.models.message import Message

__all__ = ['Pizza', 'Order', 'Message']
