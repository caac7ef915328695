"""
API Errors

Every failure a handler can produce is one of these. They are raised inside
handlers and turned into JSON responses by the application's error handler.
"""


class ApiError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = 500
    error = 'server_error'
    message = 'Internal server error.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'success': False, 'error': self.error, 'message': self.message}


class ValidationError(ApiError):
    """A required field is missing or malformed."""
    status_code = 400
    error = 'validation_error'
    message = 'Invalid request.'


class AuthError(ApiError):
    """Bad credentials or no valid admin session.

    The message is fixed so callers cannot tell which check failed.
    """
    status_code = 401
    error = 'unauthorized'
    message = 'Unauthorized.'

    def __init__(self):
        super().__init__()


class NotFoundError(ApiError):
    status_code = 404
    error = 'not_found'
    message = 'Not found.'


class PaymentStateError(ApiError):
    """The requested payment status change is not allowed."""
    status_code = 409
    error = 'conflict'
    message = 'Payment status change not allowed.'


class StoreError(ApiError):
    """The database could not complete the operation.

    Details are logged where the failure happens; the caller only sees a
    generic message.
    """
    status_code = 500
    error = 'server_error'
    message = 'Database error.'
