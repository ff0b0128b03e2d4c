"""Domain layer - value objects, domain events and exceptions.

This module exports the building blocks shared by the catalog engine:

- **Value Objects**: Immutable objects compared by value
- **Domain Events**: Represent significant catalog and cart occurrences
- **Exceptions**: Domain-specific errors and invariant violations
"""

from storefront.domain.base import DomainEvent, ValueObject
from storefront.domain.events import CartItemAddRequested, CatalogLoaded
from storefront.domain.exceptions import (
    CatalogLoadError,
    DomainError,
    InvalidPriceError,
    ProductNotFoundError,
    ProductRecordError,
    ProductSourceError,
    UnknownVariantError,
)

__all__ = [
    # Base classes
    "DomainEvent",
    "ValueObject",
    # Events
    "CartItemAddRequested",
    "CatalogLoaded",
    # Exceptions
    "CatalogLoadError",
    "DomainError",
    "InvalidPriceError",
    "ProductNotFoundError",
    "ProductRecordError",
    "ProductSourceError",
    "UnknownVariantError",
]
