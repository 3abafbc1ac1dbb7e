from typing import Optional
from pydantic import BaseModel, Field

from .user_schema import User


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Bad Request"])
    message: str = Field(..., examples=["Invalid input data"])


class SuccessResponse(BaseModel):
    """Success envelope; ``data`` is left out of the body when unset."""
    message: str = Field(..., examples=["Operation successful"])
    data: Optional[User] = None
