# models/schemas/product.py
from pydantic import BaseModel, ConfigDict, Field

from .base import TimestampModel


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Monitor curvo de 49 pulgadas"])
    price: float = Field(..., gt=0, examples=[400])


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    status: bool = Field(..., examples=[True])


class Product(ProductUpdate, TimestampModel):
    id: int = Field(..., examples=[1])

    model_config = ConfigDict(from_attributes=True)
