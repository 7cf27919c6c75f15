"""Pytest configuration and fixtures"""
import pytest
from fastapi.testclient import TestClient

from storefront.cart import CartStore
from storefront.config import Settings
from storefront.database import LocalStorage, init_db, make_engine
from storefront.main import create_app
from storefront.models import CartLineItem
from storefront.notifications import NotificationCenter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    return engine


@pytest.fixture
def storage(engine):
    return LocalStorage(engine)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notifier(clock):
    return NotificationCenter(ttl=3.0, clock=clock)


@pytest.fixture
def store(storage, notifier):
    cart = CartStore(storage, notifier)
    cart.init()
    return cart


@pytest.fixture
def shoe_a():
    return CartLineItem(id="A", name="Shoe A", price=50, image="/img/a.jpg", size="M", quantity=1)


@pytest.fixture
def shoe_b():
    return CartLineItem(id="B", name="Shoe B", price=19.99, image="/img/b.jpg", size="L", quantity=2)


@pytest.fixture
def app(engine):
    return create_app(engine=engine, settings=Settings(database_url="sqlite://"))


@pytest.fixture
def client(app):
    """Test client"""
    return TestClient(app)
