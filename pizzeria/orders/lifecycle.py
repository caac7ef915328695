"""
Order Lifecycle

Payment states of an order and the rules for moving between them.

    Pending -> Paid
    Pending -> COD
    COD     -> Paid      (cash collected on delivery)

``Paid`` is terminal and no settled order goes back to ``Pending``.
Fulfillment ``status`` is a free-form label and has no rules here.
"""

import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pizzeria.errors import PaymentStateError, ValidationError


class PaymentMethod(str, Enum):
    COD = 'COD'
    ONLINE = 'Online'


class PaymentStatus(str, Enum):
    PENDING = 'Pending'
    PAID = 'Paid'
    # Cash on delivery counts as settled for the order workflow
    COD = 'COD'


SETTLED = frozenset({PaymentStatus.PAID, PaymentStatus.COD})


@dataclass(frozen=True)
class InitialPayment:
    status: PaymentStatus
    payment_required: bool
    confirmation_token: Optional[str] = None


def initial_payment(payment_method):
    """Infer the payment state of a new order from its payment method.

    Cash on delivery is settled straight away. Every other method starts
    Pending and gets a confirmation token the customer presents when
    confirming payment.
    """
    if payment_method == PaymentMethod.COD.value:
        return InitialPayment(PaymentStatus.COD, payment_required=False)
    return InitialPayment(
        PaymentStatus.PENDING,
        payment_required=True,
        confirmation_token=secrets.token_urlsafe(24),
    )


def parse_payment_status(value):
    try:
        return PaymentStatus(value)
    except ValueError:
        allowed = ', '.join(s.value for s in PaymentStatus)
        raise ValidationError(f'paymentStatus must be one of: {allowed}.') from None


def _known_status(value):
    try:
        return PaymentStatus(value)
    except ValueError:
        return None


def can_transition(current, target):
    current = _known_status(current)
    target = PaymentStatus(target)
    if current is None or current == target:
        # Rows written before the status set was fixed can be corrected freely
        return True
    if current == PaymentStatus.PAID:
        return False
    if current in SETTLED and target == PaymentStatus.PENDING:
        return False
    return True


def transition(current, target):
    """Return ``target`` if the order may move there, else raise PaymentStateError."""
    target = PaymentStatus(target)
    if not can_transition(current, target):
        label = getattr(current, 'value', current)
        raise PaymentStateError(f'Cannot change payment status from {label} to {target.value}.')
    return target
