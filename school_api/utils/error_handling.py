"""
Error handling utilities for repository operations.
"""

from functools import wraps
from typing import Any, Callable, Dict

import structlog
from sqlalchemy.exc import IntegrityError

from school_api.exceptions import DatabaseError, SchoolApiException

logger = structlog.get_logger()


def handle_database_errors(operation_name: str):
    """
    Decorator to handle common database errors and provide consistent error messages.

    Application exceptions and integrity violations pass through unchanged,
    anything else is logged and re-raised as DatabaseError.

    Args:
        operation_name: Name of the operation for error logging
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (SchoolApiException, IntegrityError):
                # Re-raise custom exceptions as-is
                raise
            except Exception as e:
                logger.exception(
                    f"Unexpected error in {operation_name}",
                    **format_database_error(e, operation_name),
                )
                raise DatabaseError(
                    f"Failed to {operation_name}", operation=operation_name
                ) from e

        return wrapper

    return decorator


def format_database_error(error: Exception, operation: str) -> Dict[str, Any]:
    """
    Format database errors into a consistent structure for logging.

    Args:
        error: The exception that occurred
        operation: The operation that was being performed

    Returns:
        Dictionary with formatted error information
    """
    return {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "operation": operation,
    }
