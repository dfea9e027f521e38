from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response

METHOD_OVERRIDE_PARAM = "_method"
METHOD_OVERRIDE_HEADER = "X-HTTP-Method-Override"
OVERRIDABLE_METHODS = frozenset({"PUT", "PATCH", "DELETE"})


def _requested_method(request: Request) -> str | None:
    value = request.query_params.get(METHOD_OVERRIDE_PARAM) or request.headers.get(
        METHOD_OVERRIDE_HEADER
    )
    if not value:
        return None
    method = value.strip().upper()
    return method if method in OVERRIDABLE_METHODS else None


async def method_override_middleware(request: Request, call_next: Callable) -> Response:
    """Let HTML forms reach PUT/PATCH/DELETE routes.

    Only POST requests are rewritten, using ``?_method=`` or the
    ``X-HTTP-Method-Override`` header. Routing reads the method from the
    shared scope, so the rewrite must happen before ``call_next``.
    """
    if request.method == "POST":
        method = _requested_method(request)
        if method:
            request.scope["method"] = method
    return await call_next(request)
