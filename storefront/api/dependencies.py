"""FastAPI dependencies and converters shared by the routers."""

from fastapi import HTTPException, Request, status

from storefront.api.schemas import CardResponse, CartLineSchema
from storefront.application.catalog_view import CatalogView
from storefront.catalog.cart_bridge import CartLineCandidate
from storefront.catalog.variants import VariantState
from storefront.domain.exceptions import ProductNotFoundError
from storefront.infrastructure.collaborators import InMemoryCartSink


# ============================================================================
# Dependencies
# ============================================================================


def get_view(request: Request) -> CatalogView:
    """Get the catalog view of this application."""
    return request.app.state.storefront.view


def get_cart_sink(request: Request) -> InMemoryCartSink:
    """Get the cart sink of this application."""
    return request.app.state.storefront.cart


def get_card(view: CatalogView, product_id: str) -> VariantState:
    """Look up a visible card, answering 404 when it is not shown.

    Raises:
        HTTPException: If the product is not visible.
    """
    try:
        return view.card(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": e.message,
                "details": e.details,
            },
        ) from e


# ============================================================================
# Converters
# ============================================================================


def card_to_response(view: CatalogView, card: VariantState) -> CardResponse:
    """Convert a card to its response schema."""
    return CardResponse.model_validate(view.render_card(card))


def candidate_to_schema(candidate: CartLineCandidate) -> CartLineSchema:
    """Convert a cart-add record to its response schema."""
    return CartLineSchema.model_validate(candidate.to_dict())
