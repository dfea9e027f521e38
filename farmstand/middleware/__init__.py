from .method_override import method_override_middleware
from .request_id import request_id_middleware
from .security_headers import security_headers_middleware

__all__ = [
    "method_override_middleware",
    "request_id_middleware",
    "security_headers_middleware",
]
