# shopcart/services/cart_service.py
import uuid
from contextlib import contextmanager

from redis.exceptions import RedisError

from shopcart.domain.cart import Cart
from shopcart.domain.errors import (
    CartError,
    ConcurrencyConflictError,
    ConflictError,
    InternalError,
    InvalidReferenceError,
    NotFoundError,
    CART_NOT_CREATED,
    CART_NOT_FOUND,
    CART_NOT_FOUND_ON_UPDATE,
    PRODUCT_ALREADY_IN_CART,
    PRODUCT_NOT_IN_CATALOG,
)
from shopcart.domain.ports import CartStore, CatalogGateway, OwnerLock
from shopcart.utils.settings import CART_LOCK_TTL_SECONDS
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases of the cart domain.

    query (get_cart_by_user) only reads, commands (add, update, delete)
    run a read-modify-write under the owner's lock and the store rejects
    a save made against an outdated version. Both cases surface as
    ConcurrencyConflictError, which callers may retry.
    """

    def __init__(
        self,
        store: CartStore,
        catalog: CatalogGateway,
        lock_service: OwnerLock,
        lock_ttl: int = CART_LOCK_TTL_SECONDS,
    ):
        self.store = store
        self.catalog = catalog
        self.lock_service = lock_service
        self.lock_ttl = lock_ttl

    @contextmanager
    def _owner_lock(self, email: str):
        token = uuid.uuid4().hex
        if not self.lock_service.acquire_cart_lock(email, token, self.lock_ttl):
            logger.info("Cart locked by another request", email=email)
            raise ConcurrencyConflictError()
        try:
            yield
        finally:
            self._release(email, token)

    def _release(self, email: str, token: str) -> None:
        # the lock expires on its own ttl, a failed release must not replace
        # the operation's outcome
        try:
            self.lock_service.release_cart_lock(email, token)
        except RedisError as e:
            logger.warning("Failed to release cart lock", email=email, error=str(e))

    #query
    def get_cart_by_user(self, user) -> Cart:
        cart = self.store.find_one(user.email)
        if cart is None:
            raise NotFoundError(CART_NOT_FOUND)
        return cart

    #commands
    def add_product_to_cart(self, user, product_id: str, quantity: int) -> Cart:
        with self._owner_lock(user.email):
            cart = self.store.find_one(user.email)
            is_new = cart is None
            if is_new:
                cart = Cart(email=user.email)

            # checked before the catalog call, a duplicate never hits the network
            if cart.contains(product_id):
                raise ConflictError(PRODUCT_ALREADY_IN_CART)

            product = self.catalog.find_by_id(product_id)
            if product is None:
                raise InvalidReferenceError(PRODUCT_NOT_IN_CATALOG)

            cart.add_item(product, quantity)

            if is_new:
                # create + first item in one write, no empty cart is ever visible
                return self._create_cart(cart)

            self.store.save(cart)
            logger.info("Product added to cart", email=user.email, product_id=product_id, quantity=quantity)
            return cart

    def update_product_in_cart(self, user, product_id: str, quantity: int) -> Cart:
        with self._owner_lock(user.email):
            cart = self.store.find_one(user.email)
            if cart is None:
                raise NotFoundError(CART_NOT_FOUND_ON_UPDATE)

            if self.catalog.find_by_id(product_id) is None:
                raise InvalidReferenceError(PRODUCT_NOT_IN_CATALOG)

            cart.set_quantity(product_id, quantity)
            self.store.save(cart)

            logger.info("Cart item quantity updated", email=user.email, product_id=product_id, quantity=quantity)
            return cart

    def delete_product_from_cart(self, user, product_id: str) -> None:
        with self._owner_lock(user.email):
            cart = self.store.find_one(user.email)
            if cart is None:
                raise NotFoundError(CART_NOT_FOUND)

            cart.remove_item(product_id)
            self.store.save(cart)

            logger.info("Product removed from cart", email=user.email, product_id=product_id)

    def _create_cart(self, cart: Cart) -> Cart:
        try:
            created = self.store.create(cart.email, cart.items)
        except CartError:
            raise
        except Exception as e:
            logger.error("Cart not created", email=cart.email, error=str(e))
            raise InternalError(CART_NOT_CREATED) from e

        if created is None:
            logger.error("Cart not created, store returned nothing", email=cart.email)
            raise InternalError(CART_NOT_CREATED)

        logger.info("Cart created", email=cart.email, product_id=cart.items[0].product_id)
        return created
