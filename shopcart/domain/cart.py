# shopcart/domain/cart.py
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from shopcart.domain.errors import (
    ConflictError,
    InvalidReferenceError,
    PRODUCT_ALREADY_IN_CART,
    PRODUCT_NOT_IN_CART,
)


def check_quantity(quantity) -> int:
    # bool is an int subclass, True must not pass as 1
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError("Quantity must be an integer")
    if quantity <= 0:
        raise ValueError("Quantity must be greater than 0")
    return quantity


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal


@dataclass
class CartItem:
    product: Product
    quantity: int

    def __post_init__(self):
        check_quantity(self.quantity)

    @property
    def product_id(self) -> str:
        return self.product.id


class Cart:
    """
    Cart aggregate: one per owner email, products are unique within it.

    ``version`` is the stored revision this instance was loaded at; the
    store compares it on save. A cart that was never persisted has no id
    and version 0.
    """

    def __init__(self, email: str, items: List[CartItem] | None = None, id: int | None = None, version: int = 0):
        self._email = email
        self.items: List[CartItem] = list(items or [])
        self.id = id
        self.version = version

    @property
    def email(self) -> str:
        return self._email

    def __repr__(self):
        return f"Cart(email={self.email!r}, items={self.items!r}, version={self.version})"

    def index_of(self, product_id: str) -> int:
        for index, item in enumerate(self.items):
            if item.product_id == product_id:
                return index
        return -1

    def contains(self, product_id: str) -> bool:
        return self.index_of(product_id) != -1

    def find_item(self, product_id: str) -> CartItem | None:
        index = self.index_of(product_id)
        return self.items[index] if index != -1 else None

    def add_item(self, product: Product, quantity: int) -> CartItem:
        if self.contains(product.id):
            raise ConflictError(PRODUCT_ALREADY_IN_CART)
        item = CartItem(product=product, quantity=quantity)
        self.items.append(item)
        return item

    def set_quantity(self, product_id: str, quantity: int) -> CartItem:
        item = self.find_item(product_id)
        if item is None:
            raise InvalidReferenceError(PRODUCT_NOT_IN_CART)
        item.quantity = check_quantity(quantity)
        return item

    def remove_item(self, product_id: str) -> CartItem:
        index = self.index_of(product_id)
        if index == -1:
            raise InvalidReferenceError(PRODUCT_NOT_IN_CART)
        return self.items.pop(index)
