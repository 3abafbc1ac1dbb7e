from .user_schema import User, CreateUserRequest
from .response_schema import ErrorResponse, SuccessResponse

__all__ = [
    "User",
    "CreateUserRequest",
    "ErrorResponse",
    "SuccessResponse",
]
