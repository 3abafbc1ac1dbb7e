from functools import lru_cache

from infrastructure.repositories import InMemoryUserRepository


@lru_cache()
def get_user_repository() -> InMemoryUserRepository:
    """
    Dependency for injecting the UserRepository.

    The repository only serves constant data, so one instance is shared
    by every request.

    Returns:
        An instance of InMemoryUserRepository.
    """
    return InMemoryUserRepository()
