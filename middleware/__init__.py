"""Middleware modules for the application."""
from .request_id import request_id_middleware
from .logging import log_requests_middleware
from .security import add_security_headers
from .request_size import request_size_middleware

__all__ = [
    "request_id_middleware",
    "log_requests_middleware",
    "add_security_headers",
    "request_size_middleware",
]
