"""Variant pricing rules.

Derives the displayed price of a product from its base price and the
selected size and color. Everything here is pure and can be called
without any catalog or card state.

Example:
    >>> compute_price(Decimal("100"), "XL", "Navy")
    Decimal('132.00')
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from storefront.catalog.models import COLORS, SIZES, VariantSelection
from storefront.domain.base import ValueObject
from storefront.domain.exceptions import InvalidPriceError, UnknownVariantError

SIZE_FACTORS: dict[str, Decimal] = {
    "XS": Decimal("0.90"),
    "S": Decimal("0.95"),
    "M": Decimal("1.00"),
    "L": Decimal("1.10"),
    "XL": Decimal("1.20"),
}

COLOR_FACTORS: dict[str, Decimal] = {
    "Black": Decimal("1.00"),
    "White": Decimal("1.05"),
    "Navy": Decimal("1.10"),
    "Gray": Decimal("1.08"),
}

CENTS = Decimal("0.01")


class PriceAdjustment(str, Enum):
    """How a resolved price relates to the base price."""

    DISCOUNTED = "discounted"
    UPCHARGED = "upcharged"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class PriceQuote(ValueObject):
    """Resolved price with the data a price badge needs.

    Attributes:
        base_price: Unmodified product price.
        resolved_price: Price after variant factors and rounding.
        adjustment: Discounted, upcharged or neutral.
        difference: Absolute gap between the two, 2 decimal places.
    """

    base_price: Decimal
    resolved_price: Decimal
    adjustment: PriceAdjustment
    difference: Decimal

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {
            "base_price": str(self.base_price),
            "resolved_price": str(self.resolved_price),
            "adjustment": self.adjustment.value,
            "difference": str(self.difference),
        }


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _check_price(value: Decimal) -> Decimal:
    if not value.is_finite() or value < 0:
        raise InvalidPriceError(value)
    return value


def round_price(value: Decimal | int | float | str) -> Decimal:
    """Round to cents, ties away from zero.

    Args:
        value: Amount to round.

    Returns:
        Amount with exactly 2 fractional digits.
    """
    return _to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def size_factor(size: str) -> Decimal:
    """Get the multiplier for a size.

    Raises:
        UnknownVariantError: If the size is not offered.
    """
    try:
        return SIZE_FACTORS[size]
    except KeyError:
        raise UnknownVariantError("size", size, SIZES) from None


def color_factor(color: str) -> Decimal:
    """Get the multiplier for a color.

    Raises:
        UnknownVariantError: If the color is not offered.
    """
    try:
        return COLOR_FACTORS[color]
    except KeyError:
        raise UnknownVariantError("color", color, COLORS) from None


def compute_price(
    base_price: Decimal | int | float | str,
    size: str,
    color: str,
) -> Decimal:
    """Compute the displayed price for a variant.

    Both factors are applied to the unrounded base price and the result
    is rounded once, so factors never compound rounding error.

    Args:
        base_price: Unmodified product price.
        size: Selected size code.
        color: Selected color name.

    Returns:
        Resolved price with 2 fractional digits.

    Raises:
        UnknownVariantError: If size or color is not offered.
        InvalidPriceError: If the base price or result is negative or
            not finite.
    """
    base = _check_price(_to_decimal(base_price))
    price = base * size_factor(size) * color_factor(color)
    return _check_price(round_price(price))


def classify_price(
    base_price: Decimal | int | float | str,
    resolved_price: Decimal,
) -> PriceAdjustment:
    """Classify a resolved price against the base price.

    The base price is compared at display precision, which keeps the
    (M, Black) pair neutral even for bases with more than 2 decimals.

    Args:
        base_price: Unmodified product price.
        resolved_price: Output of ``compute_price``.

    Returns:
        The price adjustment.
    """
    base = round_price(base_price)
    if resolved_price < base:
        return PriceAdjustment.DISCOUNTED
    if resolved_price > base:
        return PriceAdjustment.UPCHARGED
    return PriceAdjustment.NEUTRAL


def quote_price(
    base_price: Decimal | int | float | str,
    selection: VariantSelection,
) -> PriceQuote:
    """Price a selection and describe how it differs from the base.

    Args:
        base_price: Unmodified product price.
        selection: Selected size and color.

    Returns:
        PriceQuote for the selection.
    """
    base = _to_decimal(base_price)
    resolved = compute_price(base, selection.size, selection.color)
    adjustment = classify_price(base, resolved)
    if adjustment is PriceAdjustment.NEUTRAL:
        difference = Decimal("0.00")
    else:
        difference = round_price(abs(base - resolved))
    return PriceQuote(
        base_price=base,
        resolved_price=resolved,
        adjustment=adjustment,
        difference=difference,
    )


def _percent_label(factor: Decimal) -> str:
    if factor == 1:
        return "Base"
    percent = ((factor - 1) * 100).normalize()
    sign = "+" if percent > 0 else ""
    return f"{sign}{percent:f}%"


def size_label(size: str) -> str:
    """Option label for a size, e.g. ``"XS (-10%)"``."""
    return f"{size} ({_percent_label(size_factor(size))})"


def color_label(color: str) -> str:
    """Option label for a color, e.g. ``"Navy (+10%)"``."""
    return f"{color} ({_percent_label(color_factor(color))})"
