from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from core.interface import UserRepositoryInterface
from core.usecase import UserUseCase
from infrastructure.di import get_user_repository
from interface.constants import MSG_INVALID_JSON
from interface.schemas import CreateUserRequest


async def get_user_service(
    repository: UserRepositoryInterface = Depends(get_user_repository)
) -> UserUseCase:
    """
    Get a UserUseCase instance backed by the mock user repository.

    Args:
        repository: The user repository

    Returns:
        UserUseCase: A UserUseCase instance
    """
    return UserUseCase(repository=repository)


async def get_user_request(request: Request) -> CreateUserRequest:
    """
    Decode the request body into a CreateUserRequest.

    The body is read as JSON whatever the Content-Type header says.

    Raises:
        HTTPException: 400 if the body is not a JSON object matching the field types
    """
    body = await request.body()
    try:
        return CreateUserRequest.model_validate_json(body)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MSG_INVALID_JSON
        )
