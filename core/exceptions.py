"""
Exceptions raised by the studio's helpers and configuration layer.

Every error carries a ``context`` dict of the identifiers involved (a file,
a field, a URL). Keyword arguments given as None are left out of it, so
callers can pass whatever they have at hand.
"""

from typing import Any


class TransformStudioError(Exception):
    """Base exception for the studio; keyword arguments become context."""

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = {key: value for key, value in context.items() if value is not None}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} (Context: {details})"


class ConfigurationError(TransformStudioError):
    """config.toml could not be read, written or validated (config_file=, field=)."""


class ValidationError(TransformStudioError):
    """Caller-supplied input was rejected (field=, value=)."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, field=field, value=None if value is None else str(value))


class DownloadError(TransformStudioError):
    """An image could not be fetched for download (url=, status_code=)."""


class DatabaseConnectionError(TransformStudioError):
    """The persistence layer could not open its connection."""


class UserNotFoundError(TransformStudioError):

    def __init__(self, message: str = "User not found", user_id: str = None):
        super().__init__(message, user_id=user_id)
