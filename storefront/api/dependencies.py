from fastapi import Depends, Request

from storefront.core.config import Settings
from storefront.core.exceptions import InvalidProductId, ProductNotFound
from storefront.schemas.product import Product
from storefront.services.cart import CartStore
from storefront.services.catalog import Catalog, is_numeric_id
from storefront.services.session import resolve_session_id


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_cart_store(request: Request) -> CartStore:
    return request.app.state.cart_store


def get_session_id(
    request: Request,
    settings: Settings = Depends(get_settings)
) -> str:
    """Session id resolved by the session middleware, or from the header if it did not run."""
    session_id = getattr(request.state, "session_id", None)
    if session_id is None:
        session_id = resolve_session_id(request.headers.get(settings.SESSION_HEADER))
        request.state.session_id = session_id
    return session_id


def get_product(
    product_id: str,
    catalog: Catalog = Depends(get_catalog)
) -> Product:
    """Resolve the ``{product_id}`` path parameter to a catalog product."""
    if not is_numeric_id(product_id):
        raise InvalidProductId()

    product = catalog.find_by_id(product_id)
    if product is None:
        raise ProductNotFound()

    return product
