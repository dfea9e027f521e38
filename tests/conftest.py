# tests/conftest.py
import os

# The module-level app in farmstand.main reads settings on import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("APP_ENV", "test")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from farmstand.core.config import Settings
from farmstand.db import Database
from farmstand.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url=TEST_DATABASE_URL,
        app_env="test",
        log_format="json",
        sentry_dsn=None,
        auto_create_schema=True,
    )


@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)
    # ASGITransport does not send lifespan events; run startup/shutdown here
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def app_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def database():
    db = Database(TEST_DATABASE_URL)
    db.connect()
    await db.create_schema()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
def create_product(app_client):
    """POST a product form and return the new id taken from the redirect."""

    async def _create(**fields) -> str:
        data = {"name": "Apple", "price": "1.5", "category": "fruit", "quantity": "10"}
        data.update({k: str(v) for k, v in fields.items()})
        res = await app_client.post("/products", data=data)
        assert res.status_code == 302, res.text
        return res.headers["location"].rsplit("/", 1)[-1]

    return _create
