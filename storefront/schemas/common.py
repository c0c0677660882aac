from decimal import Decimal
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel


# Kept as Decimal in memory, written as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None
    errors: Optional[List[Any]] = None
