from .cors import add_cors_middleware
from .network_logging import network_logging_middleware

__all__ = [
    "add_cors_middleware",
    "network_logging_middleware",
]
