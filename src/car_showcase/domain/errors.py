"""Domain error classes.

Protocol-agnostic errors raised by use cases. The catalog store itself never
raises; it reports failed mutations with ``False`` and the use cases turn those
into the errors below. Protocol adapters (HTTP today) translate them.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message, a machine-readable ``error_code`` and
    free-form context that adapters may expose to clients.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context (e.g., field names, identifiers)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - year_min > year_max
        - negative price_max
        - offset/limit outside the allowed window

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "year_min", "message": "Must be <= year_max"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Car with ID not found
        - Update or delete aimed at an unknown car

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Raised when the catalog store rejects an operation the use case already
    checked, which means the store and the use case disagree.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
