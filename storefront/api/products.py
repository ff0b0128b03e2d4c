"""Product card API endpoints.

Provides variant selection and quantity controls for visible products.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.api.dependencies import (
    candidate_to_schema,
    card_to_response,
    get_card,
    get_view,
)
from storefront.api.schemas import (
    CardResponse,
    ErrorResponse,
    IncrementResponse,
    SetVariantRequest,
)
from storefront.application.catalog_view import CatalogView
from storefront.catalog.models import VariantSelection
from storefront.domain.exceptions import UnknownVariantError

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/{product_id}",
    response_model=CardResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product card",
)
async def get_product(
    product_id: str,
    view: Annotated[CatalogView, Depends(get_view)],
) -> CardResponse:
    """Get the card of a visible product."""
    return card_to_response(view, get_card(view, product_id))


@router.put(
    "/{product_id}/variant",
    response_model=CardResponse,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Select variant",
    description="Change size and/or color. Ignored for out of stock products.",
)
async def set_variant(
    product_id: str,
    body: SetVariantRequest,
    view: Annotated[CatalogView, Depends(get_view)],
) -> CardResponse:
    """Select a size and/or color on a card.

    Args:
        product_id: Product identifier.
        body: Requested size and color; omitted fields are kept.
        view: Catalog view.

    Returns:
        Card after the change.

    Raises:
        HTTPException: If the product is not visible or an option is unknown.
    """
    card = get_card(view, product_id)
    try:
        selection = VariantSelection(
            size=body.size if body.size is not None else card.size,
            color=body.color if body.color is not None else card.color,
        )
    except UnknownVariantError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error_code": "UNKNOWN_VARIANT",
                "message": e.message,
                "details": e.details,
            },
        ) from e

    card.set_size(selection.size)
    card.set_color(selection.color)
    return card_to_response(view, card)


@router.post(
    "/{product_id}/increment",
    response_model=IncrementResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Add one to cart",
    description="Send one unit of the selected variant to the cart.",
)
async def increment(
    product_id: str,
    view: Annotated[CatalogView, Depends(get_view)],
) -> IncrementResponse:
    """Add one unit of the card's current variant to the cart."""
    card = get_card(view, product_id)
    candidate = card.increment()
    return IncrementResponse(
        card=card_to_response(view, card),
        cart_line=candidate_to_schema(candidate) if candidate else None,
    )


@router.post(
    "/{product_id}/decrement",
    response_model=CardResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Lower pending quantity",
    description="Lowers the card counter only; the cart is not changed.",
)
async def decrement(
    product_id: str,
    view: Annotated[CatalogView, Depends(get_view)],
) -> CardResponse:
    """Lower the card's pending quantity."""
    card = get_card(view, product_id)
    card.decrement()
    return card_to_response(view, card)
