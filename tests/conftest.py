import pytest
from httpx import ASGITransport, AsyncClient

from storefront.core.config import Settings
from storefront.main import create_app
from storefront.services.cart import CartStore
from storefront.services.catalog import Catalog


@pytest.fixture
def catalog():
    return Catalog.default()


@pytest.fixture
def store():
    return CartStore()


@pytest.fixture
def iphone(catalog):
    return catalog.find_by_id(1)


@pytest.fixture
def headphones(catalog):
    return catalog.find_by_id(4)


@pytest.fixture
def app_settings():
    return Settings(ENVIRONMENT="test", CATALOG_FILE=None)


@pytest.fixture
def app(app_settings, catalog, store):
    return create_app(app_settings, catalog=catalog, cart_store=store)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def session_client(client):
    """Client that always presents the same session id."""
    client.headers["x-session-id"] = "test-session"
    yield client
