from pydantic import BaseModel, Field
from typing import List

from storefront.schemas.common import CamelModel, Money


class Product(BaseModel):
    id: int = Field(gt=0)
    name: str
    price: Money = Field(ge=0)
    image: str
    description: str
    stock: int = Field(ge=0)

    class Config:
        frozen = True


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_products: int
    has_next: bool
    has_prev: bool


class ProductListData(BaseModel):
    products: List[Product]
    pagination: Pagination


class ProductListResponse(BaseModel):
    success: bool = True
    data: ProductListData


class ProductDetailResponse(BaseModel):
    success: bool = True
    data: Product
