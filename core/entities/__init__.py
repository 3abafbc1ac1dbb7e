from .user_entity import UserEntity

__all__ = [
    "UserEntity",
]
