"""Cart API endpoints.

Exposes what the in-process cart sink has received.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from storefront.api.dependencies import candidate_to_schema, get_cart_sink
from storefront.api.schemas import CartEventsResponse
from storefront.infrastructure.collaborators import InMemoryCartSink

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get(
    "/events",
    response_model=CartEventsResponse,
    summary="List cart-add records",
)
async def list_cart_events(
    cart: Annotated[InMemoryCartSink, Depends(get_cart_sink)],
) -> CartEventsResponse:
    """List every record sent to the cart, oldest first."""
    items = [candidate_to_schema(c) for c in cart.received]
    return CartEventsResponse(items=items, total=len(items))
