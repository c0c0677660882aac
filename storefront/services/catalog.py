import logging
import math
import re
from typing import Iterable, Optional, Union

from storefront.db.seed import default_products, load_products
from storefront.schemas.product import Pagination, Product

logger = logging.getLogger(__name__)

_PRODUCT_ID_RE = re.compile(r"[0-9]+")
_NUMERIC_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_product_id(value: Union[int, str, None]) -> Optional[int]:
    """Return ``value`` as a positive int, or None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and _PRODUCT_ID_RE.fullmatch(value):
        product_id = int(value)
        return product_id if product_id > 0 else None
    return None


def is_numeric_id(value: Optional[str]) -> bool:
    """True for any whole number, including zero and negatives, which simply match no product."""
    return value is not None and _NUMERIC_ID_RE.fullmatch(value) is not None


class Catalog:
    """
    Read-only product catalog.
    Products are loaded once and never change, so no locking is needed.
    """

    def __init__(self, products: Iterable[Product]):
        self._products = tuple(products)
        self._by_id = {product.id: product for product in self._products}

        if len(self._by_id) != len(self._products):
            raise ValueError("Product ids must be unique")

    @classmethod
    def from_file(cls, path: str) -> "Catalog":
        return cls(load_products(path))

    @classmethod
    def default(cls) -> "Catalog":
        return cls(default_products())

    def __len__(self) -> int:
        return len(self._products)

    def find_by_id(self, product_id: Union[int, str, None]) -> Optional[Product]:
        parsed = parse_product_id(product_id)
        if parsed is None:
            return None
        return self._by_id.get(parsed)

    def search(
        self,
        query: Optional[str] = None,
        page: int = 1,
        limit: int = 10
    ) -> tuple[list[Product], Pagination]:
        if query:
            needle = query.lower()
            matches = [
                product for product in self._products
                if needle in product.name.lower() or needle in product.description.lower()
            ]
        else:
            matches = list(self._products)

        # page and limit are not range checked; out-of-range values give empty slices
        start = (page - 1) * limit
        end = page * limit
        total = len(matches)
        total_pages = math.ceil(total / limit) if limit else 0

        logger.debug(f"Search query={query!r} page={page} limit={limit} matched={total}")

        pagination = Pagination(
            current_page=page,
            total_pages=total_pages,
            total_products=total,
            has_next=end < total,
            has_prev=start > 0
        )
        return matches[start:end], pagination
