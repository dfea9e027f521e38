from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response

# Pages are script-free server-rendered forms that never need framing.
# Forms only post back to this origin.
CONTENT_SECURITY_POLICY = "; ".join(
    (
        "default-src 'self'",
        "form-action 'self'",
        "frame-ancestors 'none'",
        "base-uri 'none'",
        "object-src 'none'",
    )
)

SECURITY_HEADERS: tuple[tuple[str, str], ...] = (
    ("X-Content-Type-Options", "nosniff"),
    ("Referrer-Policy", "same-origin"),
    ("X-Frame-Options", "DENY"),
    ("Content-Security-Policy", CONTENT_SECURITY_POLICY),
)


async def security_headers_middleware(request: Request, call_next: Callable) -> Response:
    """Attach the security headers for the catalog pages to every response.

    Headers a handler already set are left alone.
    """
    response = await call_next(request)
    for name, value in SECURITY_HEADERS:
        response.headers.setdefault(name, value)
    return response
