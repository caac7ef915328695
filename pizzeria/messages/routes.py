"""
Message Routes
"""

from flask import jsonify

from pizzeria.auth.decorators import admin_required
from pizzeria.errors import NotFoundError, ValidationError
from pizzeria.extensions import get_store
from pizzeria.messages import messages_bp
from pizzeria.validation import clean_text, get_json_body, require_fields


@messages_bp.route('/messages', methods=['POST'])
def add_message():
    """Store a contact form message."""
    data = get_json_body()
    require_fields(data, 'name', 'email', 'message')

    email = clean_text(data, 'email', max_length=100)
    if '@' not in email:
        raise ValidationError('Please provide a valid email address.')

    get_store().add_message(
        name=clean_text(data, 'name', max_length=100),
        email=email,
        message=clean_text(data, 'message'),
    ).unwrap()
    return jsonify(success=True)


@messages_bp.route('/messages')
@admin_required
def list_messages():
    messages = get_store().list_messages().unwrap()
    return jsonify([message.to_dict() for message in messages])


@messages_bp.route('/messages/<int:message_id>', methods=['DELETE'])
@admin_required
def delete_message(message_id):
    if not get_store().delete_message(message_id).unwrap():
        raise NotFoundError('Message not found.')
    return jsonify(success=True)
