import pytest
from httpx import ASGITransport, AsyncClient

from farmstand.core.config import Settings
from farmstand.main import create_app


@pytest.mark.asyncio
async def test_healthz_ok_without_sentry(monkeypatch):
    # Ensure SENTRY_DSN is unset
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    app = create_app(Settings(database_url="sqlite+aiosqlite://", app_env="test"))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/healthz")
        assert r.status_code == 200
        assert r.json() == {"ok": True}


def test_traces_rate_is_clamped():
    assert Settings(sentry_traces_rate=5).traces_sample_rate == 0.2
    assert Settings(sentry_traces_rate=-1).traces_sample_rate == 0.0
    assert Settings(sentry_traces_rate=0.1).traces_sample_rate == 0.1


@pytest.mark.asyncio
async def test_server_errors_are_reported_to_sentry(app_client, monkeypatch):
    captured: list[BaseException] = []
    monkeypatch.setattr(
        "farmstand.api.errors.sentry_sdk.capture_exception", lambda exc: captured.append(exc)
    )

    async def _boom(self, category=None):
        raise RuntimeError("store exploded")

    monkeypatch.setattr("farmstand.services.products.ProductService.list_products", _boom)

    res = await app_client.get("/products")
    assert res.status_code == 500
    assert res.text == "SOMETHING WENT WRONG"
    assert len(captured) == 1
    assert isinstance(captured[0], RuntimeError)


@pytest.mark.asyncio
async def test_client_errors_are_not_reported(app_client, monkeypatch):
    captured: list[BaseException] = []
    monkeypatch.setattr(
        "farmstand.api.errors.sentry_sdk.capture_exception", lambda exc: captured.append(exc)
    )

    res = await app_client.get("/products/" + "0" * 32)
    assert res.status_code == 404
    assert captured == []
