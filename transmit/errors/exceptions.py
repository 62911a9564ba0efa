"""
Exception classes mirroring the error responders.

Each exception carries the HTTP status and default message of its responder,
so code that cannot return a response directly (parameter parsing, includes
resolved deep inside a transformer) can raise and let the registered handler
render the same envelope.
"""

from http import HTTPStatus
from typing import Optional


class TransmitError(Exception):
    """
    Base exception for all errors rendered as an error envelope.

    Attributes:
        message: Human-readable error message
        http_code: HTTP status code (default: 400)
    """

    default_message = "Error"
    default_http_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: Optional[str] = None, http_code: Optional[int] = None):
        self.message = self.default_message if message is None else message
        self.http_code = int(self.default_http_code if http_code is None else http_code)
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"http_code": self.http_code, "message": self.message}


class ForbiddenError(TransmitError):
    """Raised when the caller lacks permission for an action."""

    default_message = "Forbidden"
    default_http_code = HTTPStatus.FORBIDDEN


class InternalError(TransmitError):
    """Raised when the server cannot complete an otherwise valid request."""

    default_message = "Internal Error"
    default_http_code = HTTPStatus.INTERNAL_SERVER_ERROR


class NotFoundError(TransmitError):
    """Raised when a requested resource does not exist."""

    default_message = "Resource Not Found"
    default_http_code = HTTPStatus.NOT_FOUND


class UnauthorizedError(TransmitError):
    """Raised when authentication fails or is missing."""

    default_message = "Unauthorized"
    default_http_code = HTTPStatus.UNAUTHORIZED


class UnprocessableEntityError(TransmitError):
    """Raised when a well-formed request cannot be processed."""

    default_message = "Unprocessable Entity"
    default_http_code = HTTPStatus.UNPROCESSABLE_ENTITY


class WrongArgumentsError(TransmitError):
    """Raised when request arguments are malformed."""

    default_message = "Wrong Arguments"
    default_http_code = HTTPStatus.BAD_REQUEST
