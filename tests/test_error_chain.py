import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from httpx import ASGITransport, AsyncClient

from farmstand.api import errors
from farmstand.api.errors import (
    handle_error,
    normalize,
    normalize_invalid_identifier,
    normalize_validation_error,
    render_error,
)
from farmstand.api.wrap import catch_async
from farmstand.core.exceptions import AppError, InvalidIdentifierError, ProductValidationError
from farmstand.services.validation import FieldError


def _validation_error() -> ProductValidationError:
    return ProductValidationError([FieldError("name", "Field required")])


def test_validation_error_is_normalized_to_400():
    exc = normalize_validation_error(_validation_error())
    assert isinstance(exc, AppError)
    assert exc.status == 400
    assert exc.message == "Validation Failed...Product validation failed: name: Field required"


def test_invalid_identifier_is_normalized_to_400():
    exc = normalize_invalid_identifier(InvalidIdentifierError("abc"))
    assert isinstance(exc, AppError)
    assert exc.status == 400
    assert exc.message == "Invalid Product Id: abc"


def test_other_errors_pass_through_unchanged():
    original = KeyError("x")
    assert normalize(original) is original
    app_error = AppError("Product Not Found", 404)
    assert normalize(app_error) is app_error


def test_render_uses_status_and_message():
    res = render_error(AppError("Product Not Found", 404))
    assert res.status_code == 404
    assert res.body == b"Product Not Found"


def test_render_defaults_for_unknown_errors():
    res = render_error(RuntimeError("connection string leaked"))
    assert res.status_code == 500
    assert res.body == b"SOMETHING WENT WRONG"


def test_render_defaults_for_bare_app_error():
    res = render_error(AppError())
    assert res.status_code == 500
    assert res.body == b"SOMETHING WENT WRONG"


def test_handle_error_runs_both_stages():
    res = handle_error(_validation_error())
    assert res.status_code == 400
    assert res.body.startswith(b"Validation Failed...")


@pytest.mark.asyncio
async def test_catch_async_returns_handler_result():
    @catch_async
    async def handler(value):
        return value * 2

    assert await handler(21) == 42


@pytest.mark.asyncio
async def test_catch_async_forwards_exceptions_to_channel():
    seen: list[Exception] = []

    def forward(exc):
        seen.append(exc)
        return PlainTextResponse("forwarded", status_code=418)

    boom = ValueError("boom")

    @catch_async(forward=forward)
    async def handler():
        raise boom

    res = await handler()
    assert seen == [boom]
    assert res.status_code == 418


def test_catch_async_keeps_signature():
    async def handler(request, product_id: str):
        return None

    wrapped = catch_async(handler)
    assert wrapped.__wrapped__ is handler
    assert wrapped.__name__ == "handler"


@pytest.mark.asyncio
async def test_wrapped_route_turns_unknown_errors_into_500():
    app = FastAPI()
    errors.install(app)

    @app.get("/explode")
    @catch_async
    async def explode(kind: str = "runtime"):
        if kind == "app":
            raise AppError("teapot", 418)
        raise RuntimeError("db password is hunter2")

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        res = await ac.get("/explode")
        assert res.status_code == 500
        assert res.text == "SOMETHING WENT WRONG"

        res = await ac.get("/explode", params={"kind": "app"})
        assert res.status_code == 418
        assert res.text == "teapot"


@pytest.mark.asyncio
async def test_unwrapped_app_error_uses_registered_handler():
    app = FastAPI()
    errors.install(app)

    @app.get("/missing")
    async def missing():
        raise AppError("Product Not Found", 404)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        res = await ac.get("/missing")
        assert res.status_code == 404
        assert res.text == "Product Not Found"


def test_http_exceptions_keep_their_status():
    from fastapi import HTTPException

    exc = normalize(HTTPException(status_code=403, detail="Forbidden"))
    assert isinstance(exc, AppError)
    assert exc.status == 403
    assert exc.message == "Forbidden"
