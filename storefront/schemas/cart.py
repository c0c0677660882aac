from pydantic import BaseModel, Field, StrictInt
from typing import List, Optional

from storefront.schemas.common import CamelModel, Money


class CartItemAdd(BaseModel):
    quantity: Optional[StrictInt] = None


class CartItemUpdate(BaseModel):
    quantity: Optional[StrictInt] = None


class CartItem(CamelModel):
    product_id: int = Field(alias="id")
    name: str
    price: Money
    image: str
    quantity: int


class CartData(CamelModel):
    cart: List[CartItem]
    total: Money
    item_count: int
    removed_item: Optional[CartItem] = None


class CartResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: CartData
