"""Route wrapper that funnels handler failures into the error chain."""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.responses import Response

from farmstand.api.errors import handle_error

ErrorForwarder = Callable[[Exception], Response]


def catch_async(
    handler: Callable[..., Awaitable[Any]] | None = None,
    *,
    forward: ErrorForwarder = handle_error,
):
    """Wrap an async route handler so no exception escapes it.

    The wrapper keeps the handler's signature (FastAPI resolves dependencies
    through ``__wrapped__``); any exception raised while awaiting the handler
    is passed to ``forward`` and its response is returned instead.

    Usable bare (``@catch_async``) or with a custom channel
    (``@catch_async(forward=...)``).
    """

    def decorate(fn: Callable[..., Awaitable[Any]]):
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await fn(*args, **kwargs)
            except Exception as exc:
                return forward(exc)

        return wrapper

    if handler is not None:
        return decorate(handler)
    return decorate
