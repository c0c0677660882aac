import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import List

from storefront.schemas.product import Product

logger = logging.getLogger(__name__)


DEFAULT_PRODUCTS = [
    {
        "id": 1,
        "name": "iPhone 15 Pro",
        "price": Decimal("999.99"),
        "image": "https://9to5mac.com/wp-content/uploads/sites/6/2024/07/apple-device-lineup.jpg?quality=82&strip=all&w=1600",
        "description": "Latest iPhone with advanced features",
        "stock": 50,
    },
    {
        "id": 2,
        "name": "Samsung Galaxy S24",
        "price": Decimal("899.99"),
        "image": "https://wallpaperaccess.com/full/9496579.jpg",
        "description": "Flagship Samsung smartphone",
        "stock": 30,
    },
    {
        "id": 3,
        "name": "MacBook Pro M3",
        "price": Decimal("1999.99"),
        "image": "https://wallpaperaccess.com/full/9496579.jpg",
        "description": "Powerful laptop for professionals",
        "stock": 25,
    },
    {
        "id": 4,
        "name": "Sony WH-1000XM5",
        "price": Decimal("399.99"),
        "image": "https://wallpaperaccess.com/full/9496579.jpg",
        "description": "Noise-canceling wireless headphones",
        "stock": 40,
    },
    {
        "id": 5,
        "name": "iPad Air",
        "price": Decimal("599.99"),
        "image": "https://tse4.mm.bing.net/th/id/OIP.E9Ux33FuCo7mGLn9Ey3wnAHaE8?pid=Api&P=0&h=180",
        "description": "Versatile tablet for work and play",
        "stock": 35,
    },
]


def default_products() -> List[Product]:
    return [Product(**data) for data in DEFAULT_PRODUCTS]


def load_products(path: str) -> List[Product]:
    """Read a JSON array of product objects.

    Prices are parsed as Decimal so the file's literal values are kept exactly.
    """
    with open(Path(path), encoding="utf-8") as f:
        raw = json.load(f, parse_float=Decimal)

    if not isinstance(raw, list):
        raise ValueError(f"Catalog file {path} must contain a JSON array")

    products = [Product(**item) for item in raw]
    logger.info(f"Loaded {len(products)} products from {path}")
    return products
