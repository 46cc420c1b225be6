"""Domain exceptions for the records search engine.

Defines domain-level exceptions that represent business rule violations
and upstream failures. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class RecordsException(Exception):
    """Base exception for all records search errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, entity_type).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RecordsException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(RecordsException):
    """Raised when authentication fails (e.g. missing or invalid token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(RecordsException):
    """Raised when the user lacks required permissions for the operation."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'search').
            action: Optional action that was attempted (e.g. 'read').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class UpstreamSearchException(RecordsException):
    """Raised when a record store query fails for one entity kind."""

    def __init__(
        self,
        entity_type: str,
        message: str | None = None,
        error_code: str = "UPSTREAM_ERROR",
    ) -> None:
        """Initialize with the entity kind whose store failed.

        Args:
            entity_type: Entity kind being searched (e.g. 'project').
            message: Optional human-readable message.
            error_code: Machine-readable code (subclasses override).
        """
        super().__init__(
            message or f"Search failed for {entity_type} records",
            error_code,
            {"entity_type": entity_type},
        )
        self.entity_type = entity_type


class SearchTimeoutException(RecordsException):
    """Raised when the search fan-out does not finish before its deadline."""

    def __init__(self, timeout_seconds: float, pending: list[str]) -> None:
        """Initialize with the deadline and the entity kinds still running.

        Args:
            timeout_seconds: Configured fan-out deadline.
            pending: Entity kinds whose searches had not finished.
        """
        super().__init__(
            f"Search did not complete within {timeout_seconds} seconds",
            "SEARCH_TIMEOUT",
            {"timeout_seconds": timeout_seconds, "pending": pending},
        )


class SqlNotConfiguredException(RecordsException):
    """Raised when an operation requires Postgres but the database is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
