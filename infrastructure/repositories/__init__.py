from .user_repository import InMemoryUserRepository, MOCK_USERS

__all__ = [
    "InMemoryUserRepository",
    "MOCK_USERS",
]
