from abc import ABC, abstractmethod
from typing import List, Optional

from core.entities.user_entity import UserEntity


class UserRepositoryInterface(ABC):
    @abstractmethod
    async def list_all(self) -> List[UserEntity]:
        """Return every stored user, in storage order"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        """Return the user addressed by the raw path id, or None"""
        pass
