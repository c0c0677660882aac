from fastapi import APIRouter, Depends
from typing import Optional
import logging

from storefront.api.dependencies import get_catalog, get_product, get_settings
from storefront.core.config import Settings
from storefront.schemas.product import Product, ProductDetailResponse, ProductListData, ProductListResponse
from storefront.services.catalog import Catalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    page: int = 1,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
):
    """
    List catalog products, optionally filtered by a search term.
    The term is matched case-insensitively against name and description.
    """
    if limit is None:
        limit = settings.DEFAULT_PAGE_LIMIT

    products, pagination = catalog.search(search, page, limit)
    logger.info(f"Listed products: search={search!r} page={page} limit={limit} total={pagination.total_products}")
    return ProductListResponse(data=ProductListData(products=products, pagination=pagination))


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product_detail(product: Product = Depends(get_product)):
    """Get single product detail."""
    return ProductDetailResponse(data=product)
