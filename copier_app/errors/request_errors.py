"""
Request error classifications for producer and consumer calls.

These exceptions describe problems with what the caller sent. They are
reported back as 400 responses and never retried by the relay.
"""

from typing import Any, Optional, Dict


class RequestError(Exception):
    """Base class for caller-side errors that are reported, never fatal."""

    status_code = 400

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = True


class ValidationError(RequestError):
    """A required field is missing or a field has an invalid value."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class MissingFieldError(ValidationError):
    """Required field is absent or empty."""


class InvalidFieldError(ValidationError):
    """Field is present but its value is not accepted."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, field=field, **kwargs)
        self.value = value


class MalformedRequestError(ValidationError):
    """Request body is not a JSON object."""

    def __init__(self, message: str, body_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.body_type = body_type
