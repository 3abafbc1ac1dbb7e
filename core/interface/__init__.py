from .user_repository_interface import UserRepositoryInterface

__all__ = [
    "UserRepositoryInterface",
]
