"""API schemas for the storefront API.

Pydantic models for request/response validation and serialization.
Prices are serialized as decimal strings with 2 fractional digits.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list | dict = Field(default_factory=list, description="Additional error details")
    request_id: str | None = Field(default=None, description="Request ID for correlation")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product as shown on a card."""

    id: str
    title: str
    description: str
    image: str
    category: str
    base_price: Decimal
    in_stock: bool
    link: str = Field(..., description="Detail page path")


class OptionSchema(BaseModel):
    """Selectable size or color with its price label."""

    value: str
    label: str


class SelectionSchema(BaseModel):
    """Selected size and color."""

    size: str
    color: str


class PriceQuoteSchema(BaseModel):
    """Resolved price and how it differs from the base price."""

    base_price: Decimal
    resolved_price: Decimal
    adjustment: str = Field(..., description="discounted, upcharged or neutral")
    difference: Decimal = Field(..., description="Savings or upcharge amount")


class CardResponse(BaseModel):
    """A product card with its variant state."""

    product: ProductSchema
    display_title: str = Field(..., description="Title shortened for the card")
    description_excerpt: str = Field(..., description="First 100 characters of the description")
    selection: SelectionSchema
    price: PriceQuoteSchema
    pending_quantity: int = Field(..., ge=0)
    enabled: bool = Field(..., description="False when the product is out of stock")
    size_options: list[OptionSchema]
    color_options: list[OptionSchema]


# ============================================================================
# Catalog Schemas
# ============================================================================


class FilterOptionSchema(BaseModel):
    """Category filter button."""

    value: str
    label: str
    active: bool


class CatalogResponse(BaseModel):
    """Catalog screen state."""

    loading: bool
    active_filter: str
    filters: list[FilterOptionSchema]
    products: list[CardResponse]
    total: int


class SetFilterRequest(BaseModel):
    """Request to change the category filter."""

    category: str = Field(..., min_length=1, description="Category name or 'all'")


class ReloadResponse(BaseModel):
    """Result of a catalog reload."""

    loaded: bool
    product_count: int


# ============================================================================
# Variant and Cart Schemas
# ============================================================================


class SetVariantRequest(BaseModel):
    """Request to change a card's size and/or color."""

    size: str | None = None
    color: str | None = None


class CartLineSchema(BaseModel):
    """Record sent to the cart for one add action."""

    product_id: str
    title: str
    image: str
    category: str
    base_price: Decimal
    resolved_price: Decimal
    selected_variant: SelectionSchema
    quantity_delta: int


class IncrementResponse(BaseModel):
    """Card state after an add action."""

    card: CardResponse
    cart_line: CartLineSchema | None = Field(
        default=None,
        description="Record sent to the cart; null if nothing was sent",
    )


class CartEventsResponse(BaseModel):
    """Records received by the cart."""

    items: list[CartLineSchema]
    total: int
