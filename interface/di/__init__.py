from interface.di.user_service_di import get_user_service, get_user_request

__all__ = [
    "get_user_service",
    "get_user_request",
]
