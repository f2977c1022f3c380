"""
Central error handler for page callbacks and server actions.
"""

import logging

from core.exceptions import DatabaseConnectionError, TransformStudioError, UserNotFoundError

logger = logging.getLogger(__name__)

DATABASE_CONNECTION_FAILED = "Database connection failed"
USER_NOT_FOUND = "User not found"


def handle_error(error: object) -> None:
    """
    Log an error and decide whether it is recoverable.

    Database connection failures and missing users are logged and
    swallowed. Any other exception or message is re-raised as a
    TransformStudioError so the caller's error boundary can show it.

    Args:
        error: An exception, an error message, or any other raised value

    Raises:
        TransformStudioError: For every error that is not recoverable
    """
    if isinstance(error, BaseException):
        message = str(error)
        logger.error(f"Error: {message}", exc_info=(type(error), error, error.__traceback__))

        if isinstance(error, DatabaseConnectionError) or DATABASE_CONNECTION_FAILED in message:
            logger.error("Database connection error. Please check your connection string and network access.")
            return

        if isinstance(error, UserNotFoundError) or message == USER_NOT_FOUND:
            return

        raise TransformStudioError(f"Error: {message}") from error

    if isinstance(error, str):
        logger.error(f"Error: {error}")
        raise TransformStudioError(f"Error: {error}")

    logger.error(f"Unexpected error type: {error!r}")
    raise TransformStudioError("An unexpected error occurred.")
