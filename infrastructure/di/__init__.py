from .repositories import get_user_repository

__all__ = [
    "get_user_repository",
]
