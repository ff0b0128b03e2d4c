"""Catalog API endpoints.

Provides the catalog screen state, the category filter and reloading.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.api.dependencies import card_to_response, get_view
from storefront.api.schemas import (
    CatalogResponse,
    ErrorResponse,
    FilterOptionSchema,
    ReloadResponse,
    SetFilterRequest,
)
from storefront.application.catalog_view import CatalogView

router = APIRouter(prefix="/catalog", tags=["Catalog"])


def catalog_to_response(view: CatalogView) -> CatalogResponse:
    """Convert the view to the catalog response schema."""
    cards = view.cards()
    return CatalogResponse(
        loading=view.loading,
        active_filter=view.store.active_filter,
        filters=[FilterOptionSchema(**option) for option in view.filter_options()],
        products=[card_to_response(view, card) for card in cards],
        total=len(cards),
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CatalogResponse,
    summary="Get catalog",
    description="Get the visible products with their cards and the filter buttons.",
)
async def get_catalog(
    view: Annotated[CatalogView, Depends(get_view)],
) -> CatalogResponse:
    """Get the catalog screen state.

    Args:
        view: Catalog view.

    Returns:
        Loading flag, filters and visible product cards.
    """
    return catalog_to_response(view)


@router.put(
    "/filter",
    response_model=CatalogResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Set category filter",
    description="Show only one category, or 'all' for every product.",
)
async def set_filter(
    body: SetFilterRequest,
    view: Annotated[CatalogView, Depends(get_view)],
) -> CatalogResponse:
    """Apply a category filter.

    Args:
        body: Requested category.
        view: Catalog view.

    Returns:
        Catalog state after filtering.

    Raises:
        HTTPException: If the category is not in the catalog.
    """
    if not view.select_category(body.category):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error_code": "UNKNOWN_CATEGORY",
                "message": f"Unknown category: {body.category}",
                "details": {"categories": view.store.categories()},
            },
        )
    return catalog_to_response(view)


@router.post(
    "/reload",
    response_model=ReloadResponse,
    summary="Reload catalog",
    description="Fetch the catalog again, replacing products and resetting the filter.",
)
async def reload_catalog(
    view: Annotated[CatalogView, Depends(get_view)],
) -> ReloadResponse:
    """Fetch the catalog again.

    Args:
        view: Catalog view.

    Returns:
        Whether the reload succeeded and the product count.
    """
    loaded = await view.mount()
    return ReloadResponse(loaded=loaded, product_count=len(view.store.all_products))
