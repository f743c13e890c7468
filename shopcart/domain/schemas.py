# shopcart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal


class ItemIn(BaseModel):
    """Body for adding a product or changing its quantity."""

    product_id: str = Field(..., min_length=1, description="Catalog product id")
    quantity: int = Field(..., gt=0, description="Quantity (must be > 0)")


class ProductOut(BaseModel):
    id: str
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class CartItemOut(BaseModel):
    product: ProductOut
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    email: str
    version: int
    items: List[CartItemOut]

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(..., min_length=1, max_length=100)
    address: str | None = Field(None, max_length=500)


class UserRead(BaseModel):
    id: int
    email: str
    name: str
    address: str | None = None

    model_config = ConfigDict(from_attributes=True)


class AddressIn(BaseModel):
    address: str = Field(..., min_length=1, max_length=500)


class AddressOut(BaseModel):
    address: str
