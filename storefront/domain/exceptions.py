"""Domain exceptions.

All domain-level errors raised by the catalog engine. Load failures are
recovered by the loader; variant and price errors are raised by the
pricing rules when they are called with values they cannot price.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Load Errors
# ============================================================================


class CatalogLoadError(DomainError):
    """Base class for failures while fetching or parsing the catalog."""

    pass


class ProductSourceError(CatalogLoadError):
    """Raised when the product data source cannot be read."""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize product source error.

        Args:
            url: Catalog endpoint that was requested.
            message: What went wrong.
            status_code: HTTP status code, if a response was received.
        """
        super().__init__(
            f"Product fetch from {url} failed: {message}",
            details={"url": url, "status_code": status_code},
        )
        self.url = url
        self.status_code = status_code


class ProductRecordError(CatalogLoadError):
    """Raised when a raw product record does not match the expected shape."""

    def __init__(self, index: int, errors: list[dict[str, Any]]) -> None:
        """Initialize product record error.

        Args:
            index: Position of the bad record in the fetched sequence.
            errors: Validation errors for the record.
        """
        super().__init__(
            f"Product record at position {index} is invalid",
            details={"index": index, "errors": errors},
        )


# ============================================================================
# Variant and Price Errors
# ============================================================================


class UnknownVariantError(DomainError):
    """Raised when a size or color is not part of the fixed option set."""

    def __init__(self, option: str, value: str, allowed: tuple[str, ...]) -> None:
        """Initialize unknown variant error.

        Args:
            option: Option name ("size" or "color").
            value: The rejected value.
            allowed: Values accepted for this option.
        """
        super().__init__(
            f"Unknown {option} '{value}'. Allowed: {list(allowed)}",
            details={"option": option, "value": value, "allowed": list(allowed)},
        )


class InvalidPriceError(DomainError):
    """Raised when a price is negative or not a finite number.

    This indicates corrupt base price data and is never expected
    for records that passed validation.
    """

    def __init__(self, value: object) -> None:
        """Initialize invalid price error.

        Args:
            value: The offending price value.
        """
        super().__init__(
            f"Price must be a finite non-negative amount, got {value!r}",
            details={"value": str(value)},
        )


# ============================================================================
# Lookup Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when a product is not among the currently visible products."""

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The requested product ID.
        """
        super().__init__(
            f"Product {product_id} not found",
            details={"product_id": product_id},
        )
