"""Catalog models.

Defines the loaded Product, its fixed variant options, the per-card
variant selection, and the schema raw records are validated against.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.domain.base import ValueObject
from storefront.domain.exceptions import UnknownVariantError

# Category filter value meaning "no restriction".
ALL_CATEGORIES = "all"

SIZES: tuple[str, ...] = ("XS", "S", "M", "L", "XL")
COLORS: tuple[str, ...] = ("Black", "White", "Navy", "Gray")


@dataclass(frozen=True)
class VariantOptions(ValueObject):
    """Sizes and colors a product can be configured with.

    Attributes:
        sizes: Size codes in display order.
        colors: Color names in display order.
    """

    sizes: tuple[str, ...] = SIZES
    colors: tuple[str, ...] = COLORS

    @property
    def default_size(self) -> str:
        """Middle size of the range."""
        return self.sizes[len(self.sizes) // 2]

    @property
    def default_color(self) -> str:
        """First color of the range."""
        return self.colors[0]

    def to_dict(self) -> dict[str, list[str]]:
        """Convert to dictionary."""
        return {"sizes": list(self.sizes), "colors": list(self.colors)}


# Shared by every product in the catalog.
DEFAULT_VARIANT_OPTIONS = VariantOptions()


@dataclass(frozen=True)
class VariantSelection(ValueObject):
    """A chosen (size, color) pair.

    Always a member of the fixed option set.

    Raises:
        UnknownVariantError: If size or color is not a known option.
    """

    size: str = DEFAULT_VARIANT_OPTIONS.default_size
    color: str = DEFAULT_VARIANT_OPTIONS.default_color

    def __post_init__(self) -> None:
        """Validate the selection against the fixed options."""
        if self.size not in DEFAULT_VARIANT_OPTIONS.sizes:
            raise UnknownVariantError("size", self.size, DEFAULT_VARIANT_OPTIONS.sizes)
        if self.color not in DEFAULT_VARIANT_OPTIONS.colors:
            raise UnknownVariantError("color", self.color, DEFAULT_VARIANT_OPTIONS.colors)

    @property
    def is_identity(self) -> bool:
        """Whether this selection leaves the base price unchanged."""
        return (
            self.size == DEFAULT_VARIANT_OPTIONS.default_size
            and self.color == DEFAULT_VARIANT_OPTIONS.default_color
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"size": self.size, "color": self.color}


class ProductRecord(BaseModel):
    """Raw product record as returned by the product data source.

    Only the fields the catalog needs are validated; anything else the
    source sends (ratings and so on) is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    description: str = ""
    price: Decimal = Field(gt=0)
    image: str
    category: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> Any:
        # JSON numbers arrive as floats; go through str to keep 109.95 exact.
        if isinstance(value, float):
            return Decimal(str(value))
        return value


@dataclass(frozen=True)
class Product:
    """Product as loaded into the catalog.

    Immutable for the whole session. Displayed prices are always derived
    from ``base_price`` and never written back.

    Attributes:
        id: Unique product identifier.
        title: Product title.
        description: Product description.
        image: Product image URL.
        category: Category name as sent by the source.
        base_price: Unmodified price from the source.
        in_stock: Availability, drawn once at load time.
        variant_options: Sizes and colors offered.
    """

    id: str
    title: str
    description: str
    image: str
    category: str
    base_price: Decimal
    in_stock: bool
    variant_options: VariantOptions = field(default=DEFAULT_VARIANT_OPTIONS)

    @classmethod
    def from_record(cls, record: ProductRecord, in_stock: bool) -> "Product":
        """Create from a validated raw record.

        Args:
            record: Validated source record.
            in_stock: Availability assigned for this session.

        Returns:
            Product instance.
        """
        return cls(
            id=record.id,
            title=record.title,
            description=record.description,
            image=record.image,
            category=record.category,
            base_price=record.price,
            in_stock=in_stock,
        )

    @property
    def link(self) -> str:
        """Navigation target for the product detail page."""
        return f"/product/{self.id}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "category": self.category,
            "base_price": str(self.base_price),
            "in_stock": self.in_stock,
            "variant_options": self.variant_options.to_dict(),
            "link": self.link,
        }
