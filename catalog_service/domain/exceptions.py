"""Catalog exceptions.

All catalog-level errors raised by the query pipeline, the review
generator and the repository. The API layer maps each one to an HTTP
status and a machine-readable error code; nothing here is retried.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions.

    All catalog errors should inherit from this class to allow
    catching catalog-specific errors at the API layer.
    """

    error_code = "CATALOG_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidParameterError(CatalogError):
    """Raised when a filter, sort or page value is malformed or out of range."""

    error_code = "INVALID_PARAMETER"

    def __init__(self, parameter: str, value: Any, reason: str) -> None:
        """Initialize invalid parameter error.

        Args:
            parameter: Name of the offending parameter.
            value: The rejected value.
            reason: Explanation of why the value is invalid.
        """
        super().__init__(
            f"Invalid value for '{parameter}': {reason}",
            details={"parameter": parameter, "value": value, "reason": reason},
        )
        self.parameter = parameter
        self.value = value
        self.reason = reason


class StoreUnavailableError(CatalogError):
    """Raised when a read or count against the product store fails."""

    error_code = "STORE_UNAVAILABLE"

    def __init__(self, operation: str) -> None:
        """Initialize store unavailable error.

        Args:
            operation: Repository operation that failed (e.g., "find_all").
        """
        super().__init__(
            f"Product store unavailable during '{operation}'",
            details={"operation": operation},
        )
        self.operation = operation


class NotFoundError(CatalogError):
    """Base class for lookups that matched nothing."""

    error_code = "NOT_FOUND"


class ProductNotFoundError(NotFoundError):
    """Raised when no product matches an identifier."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The identifier that was looked up.
        """
        super().__init__(
            f"Product with ID {product_id} does not exist",
            details={"product_id": product_id},
        )
        self.product_id = product_id
