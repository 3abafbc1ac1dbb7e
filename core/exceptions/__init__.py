from .user import UserNotFoundError

__all__ = [
    "UserNotFoundError",
]
