"""
Request Validation Helpers

Field presence and shape checks shared by the API handlers. Anything that
fails raises ValidationError (400).
"""

from decimal import Decimal, InvalidOperation

from flask import request

from pizzeria.errors import ValidationError

MAX_AMOUNT = Decimal('1e8')


def get_json_body():
    """Return the request body as a dict."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object.')
    return data


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data, *fields):
    missing = [name for name in fields if _is_blank(data.get(name))]
    if missing:
        raise ValidationError(f'Missing required field(s): {", ".join(missing)}.')


def clean_text(data, name, max_length=None, required=True):
    """Return ``data[name]`` stripped, or None when optional and absent."""
    value = data.get(name)
    if _is_blank(value):
        if required:
            raise ValidationError(f'Missing required field(s): {name}.')
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{name} must be a string.')
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f'{name} must be at most {max_length} characters.')
    return value


def parse_amount(value, name):
    """Parse a non-negative money amount from a JSON number or numeric string."""
    if isinstance(value, bool):
        raise ValidationError(f'{name} must be a number.')
    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite() or amount < 0:
            raise ValidationError(f'{name} must be a non-negative number.')
        # Money columns are Numeric(10, 2)
        if amount >= MAX_AMOUNT:
            raise ValidationError(f'{name} must be less than {MAX_AMOUNT:,.0f}.')
        return amount.quantize(Decimal('0.01'))
    except (InvalidOperation, ValueError):
        raise ValidationError(f'{name} must be a number.') from None
