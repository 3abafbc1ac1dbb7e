import logging
from typing import List, Optional, Tuple

from core.entities import UserEntity
from core.interface import UserRepositoryInterface

# Process-wide read-only dataset
MOCK_USERS: Tuple[UserEntity, ...] = (
    UserEntity(id=1, name="John Doe", email="john@example.com", age=30),
    UserEntity(id=2, name="Jane Smith", email="jane@example.com", age=25),
)


class InMemoryUserRepository(UserRepositoryInterface):
    """
    Repository serving the fixed mock users.

    Only the first record is addressable by id; lookups compare the raw
    path segment against its id as a string, so "01" or " 1" do not match.
    """

    def __init__(self, users: Tuple[UserEntity, ...] = MOCK_USERS):
        self.users = users
        self.logger = logging.getLogger("user_repository")

    async def list_all(self) -> List[UserEntity]:
        """
        Retrieve all users.
        """
        return list(self.users)

    async def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        """
        Retrieve the canonical user if ``user_id`` addresses it.
        """
        canonical = self.users[0]
        if user_id == str(canonical.id):
            return canonical
        self.logger.debug(f"No user addressable by id {user_id!r}")
        return None
