from .security_headers import SecurityHeadersMiddleware
from .request_id import RequestIDMiddleware
from .logging import StructuredLoggingMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
    "RequestIDMiddleware",
    "StructuredLoggingMiddleware",
]
