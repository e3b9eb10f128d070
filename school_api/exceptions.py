"""
Custom exceptions and error handling utilities for the school API.
"""

import re
from typing import Any, Dict, Optional


class SchoolApiException(Exception):
    """Base exception class for all school API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__
        super().__init__(message)


class AuthenticationError(SchoolApiException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, status_code=401, error_code="AUTHENTICATION_ERROR")


class NotFoundError(SchoolApiException):
    """Raised when a resource is not found."""

    def __init__(
        self, message: str = "Resource not found", resource_type: Optional[str] = None
    ):
        details = {"resource_type": resource_type} if resource_type else {}
        super().__init__(
            message, status_code=404, details=details, error_code="NOT_FOUND_ERROR"
        )


class ConflictError(SchoolApiException):
    """Raised when there's a conflict with the current state."""

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message, status_code=409, error_code="CONFLICT_ERROR")


class DatabaseError(SchoolApiException):
    """Raised when database operations fail."""

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
    ):
        details = {"operation": operation} if operation else {}
        super().__init__(
            message, status_code=500, details=details, error_code="DATABASE_ERROR"
        )


# Startup errors. These never reach a client; they abort the process.


class ConfigurationError(SchoolApiException):
    """Raised when application settings cannot be loaded."""

    def __init__(self, message: str = "Invalid configuration", field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message, status_code=500, details=details, error_code="CONFIGURATION_ERROR"
        )


class DatabaseConnectionError(SchoolApiException):
    """Raised when the database cannot be reached at startup."""

    def __init__(self, message: str = "Failed to connect to database"):
        super().__init__(
            message, status_code=500, error_code="DATABASE_CONNECTION_ERROR"
        )


class MigrationError(SchoolApiException):
    """Raised when the schema cannot be created or updated."""

    def __init__(self, message: str = "Failed to migrate database"):
        super().__init__(message, status_code=500, error_code="MIGRATION_ERROR")


def extract_sql_error_message(exception: Exception) -> tuple[str, str]:
    """
    Extract meaningful error message from SQLAlchemy exceptions.

    Returns:
        tuple: (user_friendly_message, technical_details)
    """
    error_str = str(exception)
    lowered = error_str.lower()

    if "no such table" in lowered:
        # SQLite: 'no such table: teachers'
        match = re.search(r"no such table: (\w+)", error_str)
        if match:
            return f"Database table '{match.group(1)}' does not exist", error_str
        return "Database table does not exist", error_str

    elif "relation" in lowered and "does not exist" in lowered:
        match = re.search(r'relation "([^"]*)" does not exist', error_str)
        if match:
            return f"Database table '{match.group(1)}' does not exist", error_str
        return "Database table does not exist", error_str

    elif "duplicate" in lowered or "unique constraint" in lowered:
        return "Duplicate record - this data already exists", error_str

    elif "not null constraint" in lowered:
        return "Required field is missing", error_str

    # Default fallback
    return "Database query failed", error_str
