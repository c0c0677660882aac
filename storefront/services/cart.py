import logging
import threading
from contextlib import contextmanager
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Iterator, List, Optional, Union

from storefront.core.exceptions import (
    CartAlreadyEmpty,
    CartItemNotFound,
    InsufficientStock,
    InvalidProductId,
    InvalidQuantity,
    QuantityRequired,
)
from storefront.schemas.cart import CartData, CartItem
from storefront.schemas.product import Product
from storefront.services.catalog import parse_product_id

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def validate_quantity(quantity) -> None:
    """Shared precondition for add and update: a supplied quantity must be a positive int."""
    if quantity is None:
        return
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantity()


def cart_total(items: Iterable[CartItem]) -> Decimal:
    total = sum((item.price * item.quantity for item in items), Decimal("0.00"))
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


class CartStore:
    """
    In-memory carts keyed by session id.

    Carts are created lazily and live as long as the store. Each session has
    its own lock, so the read-modify-write in add_item and update_item stays
    atomic under a threaded server. Sessions never block each other.
    """

    def __init__(self):
        self._carts: Dict[str, List[CartItem]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = self._locks[session_id] = threading.Lock()
            return lock

    @contextmanager
    def _session_cart(self, session_id: str) -> Iterator[List[CartItem]]:
        with self._lock_for(session_id):
            yield self._carts.setdefault(session_id, [])

    @staticmethod
    def _snapshot(items: List[CartItem], removed_item: Optional[CartItem] = None) -> CartData:
        return CartData(
            cart=[item.model_copy() for item in items],
            total=cart_total(items),
            item_count=len(items),
            removed_item=removed_item
        )

    @staticmethod
    def _find(items: List[CartItem], product_id: int) -> Optional[CartItem]:
        return next((item for item in items if item.product_id == product_id), None)

    def session_count(self) -> int:
        with self._registry_lock:
            return len(self._carts)

    def get_cart(self, session_id: str) -> CartData:
        with self._session_cart(session_id) as items:
            return self._snapshot(items)

    def add_item(self, session_id: str, product: Product, quantity: Optional[int] = None) -> CartData:
        validate_quantity(quantity)
        if quantity is None:
            quantity = 1

        if quantity > product.stock:
            logger.warning(
                f"Rejected add: session={session_id} product_id={product.id} "
                f"quantity={quantity} stock={product.stock}"
            )
            raise InsufficientStock(product.stock)

        with self._session_cart(session_id) as items:
            existing = self._find(items, product.id)

            if existing is not None:
                new_quantity = existing.quantity + quantity
                if new_quantity > product.stock:
                    logger.warning(
                        f"Rejected add: session={session_id} product_id={product.id} "
                        f"would reach {new_quantity} over stock {product.stock}"
                    )
                    raise InsufficientStock(
                        product.stock,
                        f"Cannot add {quantity} more items. "
                        f"Total would exceed stock limit of {product.stock}."
                    )
                existing.quantity = new_quantity
            else:
                items.append(CartItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    image=product.image,
                    quantity=quantity
                ))

            logger.info(f"Added to cart: session={session_id} product_id={product.id} quantity={quantity}")
            return self._snapshot(items)

    def update_item(self, session_id: str, product: Product, quantity: Optional[int]) -> CartData:
        validate_quantity(quantity)
        if not quantity:
            raise QuantityRequired()

        with self._session_cart(session_id) as items:
            existing = self._find(items, product.id)
            if existing is None:
                raise CartItemNotFound()

            if quantity > product.stock:
                logger.warning(
                    f"Rejected update: session={session_id} product_id={product.id} "
                    f"quantity={quantity} stock={product.stock}"
                )
                raise InsufficientStock(product.stock)

            existing.quantity = quantity
            logger.info(f"Updated cart item: session={session_id} product_id={product.id} quantity={quantity}")
            return self._snapshot(items)

    def remove_item(self, session_id: str, product_id: Union[int, str]) -> CartData:
        parsed = parse_product_id(product_id)
        if parsed is None:
            raise InvalidProductId("Invalid product ID.")

        with self._session_cart(session_id) as items:
            existing = self._find(items, parsed)
            if existing is None:
                raise CartItemNotFound()

            items.remove(existing)
            logger.info(f"Removed from cart: session={session_id} product_id={parsed}")
            return self._snapshot(items, removed_item=existing)

    def clear_cart(self, session_id: str) -> CartData:
        with self._session_cart(session_id) as items:
            if not items:
                raise CartAlreadyEmpty()

            self._carts[session_id] = []
            logger.info(f"Cart cleared: session={session_id}")
            return self._snapshot([])
