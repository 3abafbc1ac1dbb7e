from .app_settings import AppSettings
from .cors_settings import CorsSettings
from .logging_config import setup_logger, log_network_io

__all__ = [
    "AppSettings",
    "CorsSettings",
    "setup_logger",
    "log_network_io",
]
