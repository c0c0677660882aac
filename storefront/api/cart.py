from fastapi import APIRouter, Depends, status
from typing import Optional
import logging

from storefront.api.dependencies import get_cart_store, get_product, get_session_id
from storefront.core.exceptions import InvalidQuantity
from storefront.schemas.cart import CartItemAdd, CartItemUpdate, CartResponse
from storefront.schemas.product import Product
from storefront.services.cart import CartStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/cart", tags=["cart"])


def _requested_quantity(item, session_id: str) -> Optional[int]:
    """Quantity from the body. An omitted field is None; an explicit null is rejected."""
    if item is None or "quantity" not in item.model_fields_set:
        return None

    if item.quantity is None:
        logger.warning(f"Rejected null quantity: session={session_id}")
        raise InvalidQuantity()

    return item.quantity


@router.get("", response_model=CartResponse, response_model_exclude_none=True)
async def get_cart(
    session_id: str = Depends(get_session_id),
    store: CartStore = Depends(get_cart_store)
):
    """Get the current session's cart."""
    logger.debug(f"Cart requested: session={session_id}")
    return CartResponse(data=store.get_cart(session_id))


@router.post(
    "/{product_id}",
    response_model=CartResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def add_to_cart(
    item: Optional[CartItemAdd] = None,
    product: Product = Depends(get_product),
    session_id: str = Depends(get_session_id),
    store: CartStore = Depends(get_cart_store)
):
    """Add a product to the cart. Adding a product already in the cart increases its quantity."""
    quantity = _requested_quantity(item, session_id)
    cart = store.add_item(session_id, product, quantity)
    return CartResponse(message="Item added to cart successfully", data=cart)


@router.put("/{product_id}", response_model=CartResponse, response_model_exclude_none=True)
async def update_cart_item(
    item: Optional[CartItemUpdate] = None,
    product: Product = Depends(get_product),
    session_id: str = Depends(get_session_id),
    store: CartStore = Depends(get_cart_store)
):
    """Set the quantity of a product already in the cart."""
    quantity = _requested_quantity(item, session_id)
    cart = store.update_item(session_id, product, quantity)
    return CartResponse(message="Cart item updated successfully", data=cart)


@router.delete("/{product_id}", response_model=CartResponse, response_model_exclude_none=True)
async def remove_from_cart(
    product_id: str,
    session_id: str = Depends(get_session_id),
    store: CartStore = Depends(get_cart_store)
):
    cart = store.remove_item(session_id, product_id)
    return CartResponse(
        message=f"{cart.removed_item.name} removed from cart successfully",
        data=cart
    )


@router.delete("", response_model=CartResponse, response_model_exclude_none=True)
async def clear_cart(
    session_id: str = Depends(get_session_id),
    store: CartStore = Depends(get_cart_store)
):
    cart = store.clear_cart(session_id)
    return CartResponse(message="Cart cleared successfully", data=cart)
