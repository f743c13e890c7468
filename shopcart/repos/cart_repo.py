# shopcart/repos/cart_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shopcart.data.models.cart import CartModel
from shopcart.data.models.cart_item import CartItemModel
from shopcart.domain.cart import Cart, CartItem, Product
from shopcart.domain.errors import ConcurrencyConflictError
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


def _to_domain(model: CartModel) -> Cart:
    items = [
        CartItem(
            product=Product(id=i.product_id, name=i.product_name, price=i.price),
            quantity=i.quantity,
        )
        for i in model.items
    ]
    return Cart(email=model.email, items=items, id=model.id, version=model.version)


def _to_model(item: CartItem, position: int) -> CartItemModel:
    return CartItemModel(
        product_id=item.product.id,
        product_name=item.product.name,
        price=item.product.price,
        quantity=item.quantity,
        position=position,
    )


class CartRepo:
    """
    SQL cart store. Every save bumps ``carts.version`` with a conditional
    update, a writer holding an old version gets ConcurrencyConflictError.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_one(self, email: str) -> Cart | None:
        model = self.db.execute(
            select(CartModel).where(CartModel.email == email)
        ).scalar_one_or_none()
        return _to_domain(model) if model else None

    def create(self, email: str, items: List[CartItem]) -> Cart:
        model = CartModel(
            email=email,
            version=1,
            items=[_to_model(item, pos) for pos, item in enumerate(items)],
        )
        self.db.add(model)
        try:
            self.db.commit()
        except IntegrityError:
            # unique email: someone else created this owner's cart in the meantime
            self.db.rollback()
            logger.warning("Cart already created by another request", email=email)
            raise ConcurrencyConflictError()
        except SQLAlchemyError:
            # leave the session usable for the rest of the request
            self.db.rollback()
            raise

        self.db.refresh(model)
        logger.info("Created cart", cart_id=model.id, email=email)
        return _to_domain(model)

    def update_cart_version(self, cart_id: int, old_version: int) -> int:
        # UPDATE carts SET version = old + 1 WHERE id = :id AND version = :old
        return (
            self.db.query(CartModel)
            .filter(CartModel.id == cart_id, CartModel.version == old_version)
            .update({"version": old_version + 1}, synchronize_session="fetch")
        )

    def save(self, cart: Cart) -> None:
        rowcount = self.update_cart_version(cart.id, cart.version)
        if rowcount == 0:
            self.db.rollback()
            raise ConcurrencyConflictError()

        model = self.db.get(CartModel, cart.id)
        self._sync_items(model, cart.items)

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConcurrencyConflictError()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        cart.version += 1
        logger.info("Saved cart", cart_id=cart.id, email=cart.email, version=cart.version)

    def _sync_items(self, model: CartModel, items: List[CartItem]) -> None:
        # diff instead of replace: re-inserting a product before the old row
        # is deleted would trip u_cart_product
        wanted = {item.product.id for item in items}
        for row in list(model.items):
            if row.product_id not in wanted:
                model.items.remove(row)

        existing = {row.product_id: row for row in model.items}
        for position, item in enumerate(items):
            row = existing.get(item.product.id)
            if row is None:
                model.items.append(_to_model(item, position))
            else:
                row.quantity = item.quantity
                row.position = position
