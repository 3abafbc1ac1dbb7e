from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Request, status

from core.exceptions import UserNotFoundError
from core.usecase import UserUseCase
from interface.constants import (
    MSG_USER_CREATED,
    MSG_USER_DELETED,
    MSG_USER_UPDATED,
    PAGINATION_PARAMETERS,
    RESPONSE_400,
    RESPONSE_404,
    RESPONSE_429,
    RESPONSE_500,
    user_request_body,
)
from interface.di import get_user_request, get_user_service
from interface.rate_limit import current_rate_limit, limiter
from interface.schemas import CreateUserRequest, SuccessResponse, User
from utils.logging_config import setup_logger

logger = setup_logger("user_router", "router.log")

# Create user router
user_router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        status.HTTP_429_TOO_MANY_REQUESTS: RESPONSE_429,
        status.HTTP_500_INTERNAL_SERVER_ERROR: RESPONSE_500,
    }
)


@user_router.get(
    "",
    response_model=List[User],
    summary="Get all users",
    description="Get a list of all users",
    openapi_extra=PAGINATION_PARAMETERS,
)
@limiter.limit(current_rate_limit)
async def list_users(
    request: Request,
    user_service: UserUseCase = Depends(get_user_service)
):
    """
    List every user.

    ``page`` and ``limit`` are accepted but the full collection is always returned.
    """
    logger.debug(
        f"list users page={request.query_params.get('page', '1')} "
        f"limit={request.query_params.get('limit', '10')}"
    )
    users = await user_service.list_users()
    return [User.model_validate(user.model_dump()) for user in users]


@user_router.get(
    "/{user_id}",
    response_model=User,
    summary="Get user by ID",
    description="Get a single user by their ID",
    responses={status.HTTP_404_NOT_FOUND: RESPONSE_404},
)
@limiter.limit(current_rate_limit)
async def get_user(
    request: Request,
    user_id: str = Path(..., description="User ID"),
    user_service: UserUseCase = Depends(get_user_service)
):
    try:
        user = await user_service.get_user(user_id)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

    return User.model_validate(user.model_dump())


@user_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Create a new user",
    description="Create a new user with the provided information",
    responses={status.HTTP_400_BAD_REQUEST: RESPONSE_400},
    openapi_extra=user_request_body("User data"),
)
@limiter.limit(current_rate_limit)
async def create_user(
    request: Request,
    user_data: CreateUserRequest = Depends(get_user_request),
    user_service: UserUseCase = Depends(get_user_service)
):
    """
    Create a new user.

    Nothing is stored; the response echoes the submitted fields under a fixed id.
    """
    user = await user_service.create_user(
        name=user_data.name,
        email=user_data.email,
        age=user_data.age
    )
    return SuccessResponse(
        message=MSG_USER_CREATED,
        data=User.model_validate(user.model_dump())
    )


@user_router.put(
    "/{user_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Update an existing user",
    description="Update user information by ID",
    responses={status.HTTP_400_BAD_REQUEST: RESPONSE_400},
    openapi_extra=user_request_body("Updated user data"),
)
@limiter.limit(current_rate_limit)
async def update_user(
    request: Request,
    user_id: str = Path(..., description="User ID"),
    update_data: CreateUserRequest = Depends(get_user_request),
    user_service: UserUseCase = Depends(get_user_service)
):
    """
    Update a user's information.

    The returned user always carries id 1, whatever id the path names.
    """
    user = await user_service.update_user(
        user_id=user_id,
        name=update_data.name,
        email=update_data.email,
        age=update_data.age
    )
    return SuccessResponse(
        message=MSG_USER_UPDATED,
        data=User.model_validate(user.model_dump())
    )


@user_router.delete(
    "/{user_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Delete a user",
    description="Delete a user by ID",
)
@limiter.limit(current_rate_limit)
async def delete_user(
    request: Request,
    user_id: str = Path(..., description="User ID"),
    user_service: UserUseCase = Depends(get_user_service)
):
    await user_service.delete_user(user_id)
    return SuccessResponse(message=MSG_USER_DELETED)
