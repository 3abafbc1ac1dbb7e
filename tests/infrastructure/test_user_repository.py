import pytest
from pydantic import ValidationError

from core.entities import UserEntity
from infrastructure.di import get_user_repository
from infrastructure.repositories import InMemoryUserRepository, MOCK_USERS


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.mark.asyncio
async def test_list_all_returns_mock_users_in_order(repository):
    users = await repository.list_all()

    assert users == [
        UserEntity(id=1, name="John Doe", email="john@example.com", age=30),
        UserEntity(id=2, name="Jane Smith", email="jane@example.com", age=25),
    ]


@pytest.mark.asyncio
async def test_list_all_returns_a_copy(repository):
    users = await repository.list_all()
    users.clear()

    assert len(await repository.list_all()) == 2


@pytest.mark.asyncio
async def test_get_by_id_canonical_user(repository):
    assert await repository.get_by_id("1") == MOCK_USERS[0]


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", ["2", "01", " 1", "1.0", "", "abc"])
async def test_get_by_id_only_matches_exact_string(repository, user_id):
    assert await repository.get_by_id(user_id) is None


def test_mock_users_are_immutable():
    with pytest.raises(ValidationError):
        MOCK_USERS[0].name = "Changed"


def test_get_user_repository_is_shared():
    assert get_user_repository() is get_user_repository()
