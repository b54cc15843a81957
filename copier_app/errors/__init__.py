"""
Error classification for the signal relay.

Request errors are caused by the caller and map to 4xx responses.
System failures are raised on the server side and map to 5xx responses.
"""

from .request_errors import (
    RequestError,
    ValidationError,
    MissingFieldError,
    InvalidFieldError,
    MalformedRequestError,
)
from .system_failures import (
    SystemFailureError,
    InternalError,
    ConfigurationError,
)

__all__ = [
    # Request Errors
    "RequestError",
    "ValidationError",
    "MissingFieldError",
    "InvalidFieldError",
    "MalformedRequestError",
    # System Failures
    "SystemFailureError",
    "InternalError",
    "ConfigurationError",
]
