import logging
from typing import List

from core.entities import UserEntity
from core.exceptions import UserNotFoundError
from core.interface import UserRepositoryInterface

# Ids handed out to fabricated users; nothing is ever stored.
CREATED_USER_ID = 3
UPDATED_USER_ID = 1


class UserUseCase:
    """
    Use case class for handling user-related operations.

    The backing repository is read-only: create, update and delete build
    plausible results without changing what the repository holds, so any
    two calls with the same input return the same result.
    """

    def __init__(self, repository: UserRepositoryInterface):
        self.repository = repository
        self.logger = logging.getLogger(__name__)

    async def list_users(self) -> List[UserEntity]:
        """Return every user in the repository."""
        return await self.repository.list_all()

    async def get_user(self, user_id: str) -> UserEntity:
        """
        Look up a single user by the raw id taken from the request path.

        Args:
            user_id: The id segment exactly as it appeared in the URL

        Returns:
            The matching user entity

        Raises:
            UserNotFoundError: If no user is addressable by ``user_id``
        """
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def create_user(self, name: str, email: str, age: int) -> UserEntity:
        """
        Build the user that a create request would produce.

        Args:
            name: User's full name
            email: User's email address
            age: User's age

        Returns:
            A new user entity with a fixed id
        """
        return UserEntity(id=CREATED_USER_ID, name=name, email=email, age=age)

    async def update_user(self, user_id: str, name: str, email: str, age: int) -> UserEntity:
        """
        Build the user that an update request would produce.

        The returned id is always ``UPDATED_USER_ID``; ``user_id`` is only logged.
        """
        self.logger.info(f"update user id: {user_id}")
        return UserEntity(id=UPDATED_USER_ID, name=name, email=email, age=age)

    async def delete_user(self, user_id: str) -> None:
        """Acknowledge a delete request for ``user_id``."""
        self.logger.info(f"delete user id: {user_id}")
