import copy
import os
from decimal import Decimal

# must be set before shopcart.data.database builds its engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from shopcart.data.database import Base
from shopcart.data.models.user import UserModel
import shopcart.data.models  # noqa: F401
from shopcart.domain.cart import Cart, Product
from shopcart.domain.errors import ConcurrencyConflictError
from shopcart.services.cart_service import CartService


class InMemoryCartStore:
    """Cart store keeping deep copies, so callers never share state with it."""

    def __init__(self):
        self.carts = {}
        self.fail_create = None
        self.saves = 0

    def find_one(self, email):
        cart = self.carts.get(email)
        return copy.deepcopy(cart) if cart else None

    def create(self, email, items):
        if self.fail_create:
            raise self.fail_create
        if email in self.carts:
            raise ConcurrencyConflictError()
        cart = Cart(email=email, items=copy.deepcopy(items), id=len(self.carts) + 1, version=1)
        self.carts[email] = copy.deepcopy(cart)
        return cart

    def save(self, cart):
        stored = self.carts.get(cart.email)
        if stored is None or stored.version != cart.version:
            raise ConcurrencyConflictError()
        cart.version += 1
        self.carts[cart.email] = copy.deepcopy(cart)
        self.saves += 1


class FakeCatalog:
    def __init__(self, products):
        self.products = {p.id: p for p in products}
        self.lookups = []

    def find_by_id(self, product_id):
        self.lookups.append(product_id)
        return self.products.get(product_id)


class FakeLockService:
    def __init__(self):
        self.held = {}
        self.acquired = 0
        self.released = 0
        self.fail_release = None

    def acquire_cart_lock(self, email, token, ttl):
        if email in self.held:
            return False
        self.held[email] = token
        self.acquired += 1
        return True

    def release_cart_lock(self, email, token):
        if self.fail_release:
            raise self.fail_release
        if self.held.get(email) != token:
            return False
        del self.held[email]
        self.released += 1
        return True


KEYBOARD = Product(id="p1", name="Keyboard", price=Decimal("199.99"))
MOUSE = Product(id="p2", name="Mouse", price=Decimal("49.50"))
MONITOR = Product(id="p3", name="Monitor", price=Decimal("899.00"))


@pytest.fixture
def store():
    return InMemoryCartStore()


@pytest.fixture
def catalog():
    return FakeCatalog([KEYBOARD, MOUSE, MONITOR])


@pytest.fixture
def lock_service():
    return FakeLockService()


@pytest.fixture
def cart_service(store, catalog, lock_service):
    return CartService(store=store, catalog=catalog, lock_service=lock_service)


@pytest.fixture
def user():
    return UserModel(email="a@x.com", name="Alice")


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'cart.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()
