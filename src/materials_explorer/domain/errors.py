"""Domain error classes.

Protocol-agnostic errors that represent failures of the explorer core.
These errors are translated to appropriate formats (HTTP today) by protocol adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains error information that can be translated to HTTP or any
    other presentation format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
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
    """Invalid facet operation requested by the caller.

    Examples:
        - Unknown facet name
        - Categorical value not present in the catalog
        - Endpoint other than "lower" / "upper"

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
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "crystal_system", "message": "Unknown value"}]
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


class LoadError(ValidationError):
    """Catalog failed schema validation.

    Fatal: no partial catalog is ever accepted. Carries one entry per
    offending field, prefixed with the record index.

    Protocol mappings:
        - REST: 500 Internal Server Error (the service cannot start)
    """

    error_code: str = "CATALOG_LOAD_ERROR"


class ParseError(DomainError):
    """Boundary text could not be parsed as a number.

    Always recovered locally by the range control that raised it.
    """

    error_code: str = "PARSE_ERROR"

    def __init__(self, raw: str, **context: Any) -> None:
        super().__init__(f"'{raw}' is not a valid number", raw=raw, **context)


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Material with ID not in the catalog
        - Explorer session expired or never created

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Material", "Session")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)
