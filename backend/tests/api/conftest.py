"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - The app is built through create_app() with injected settings and DB manager
    - Lifespan is NOT run by the client (tests that need it enter it explicitly)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from product_api.config import Settings
from product_api.main import create_app
from product_api.models.product import Product as ProductModel

FRONTEND_URL = "http://localhost:5173"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        frontend_url=FRONTEND_URL,
        log_format="text",
    )


@pytest.fixture
def app(settings, db_manager):
    return create_app(settings, db_manager)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_product(db_manager):
    """Insert one available product directly into the test DB."""
    async with db_manager.session() as db:
        product = ProductModel(name="Monitor curvo", price=300, availability=True)
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product
