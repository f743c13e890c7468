# shopcart/domain/ports.py
from typing import List, Protocol

from shopcart.domain.cart import Cart, CartItem, Product


class CatalogGateway(Protocol):
    def find_by_id(self, product_id: str) -> Product | None:
        ...


class CartStore(Protocol):
    """
    Persistence of whole cart documents keyed by owner email.

    create() and save() raise ConcurrencyConflictError when another writer
    got there first (owner already has a cart / version moved on).
    """

    def find_one(self, email: str) -> Cart | None:
        ...

    def create(self, email: str, items: List[CartItem]) -> Cart:
        ...

    def save(self, cart: Cart) -> None:
        ...


class OwnerLock(Protocol):
    def acquire_cart_lock(self, email: str, token: str, ttl: int) -> bool:
        ...

    def release_cart_lock(self, email: str, token: str) -> bool:
        ...
