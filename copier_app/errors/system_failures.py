"""
System failure error classifications.

These exceptions represent failures on the relay side. A request that hits
one gets a 500 response; the process keeps serving other requests.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for server-side failures."""

    status_code = 500

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = False


class InternalError(SystemFailureError):
    """Unexpected exception raised while handling a request."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 cause: Optional[BaseException] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.cause = cause

    @classmethod
    def wrap(cls, exc: BaseException, operation: Optional[str] = None) -> "InternalError":
        """Wrap an arbitrary exception, keeping its message."""
        if isinstance(exc, InternalError):
            return exc
        return cls(str(exc) or exc.__class__.__name__, operation=operation, cause=exc)


class ConfigurationError(SystemFailureError):
    """Invalid configuration detected at startup."""

    def __init__(self, message: str, issues: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.issues = issues or []
