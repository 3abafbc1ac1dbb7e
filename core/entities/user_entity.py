from pydantic import BaseModel, ConfigDict, Field


class UserEntity(BaseModel):
    """
    User entity model representing a user in the system.
    Instances are immutable; every operation that "changes" a user
    builds a new entity instead.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique identifier for the user")
    name: str = Field(..., description="User's full name")
    email: str = Field(..., description="User's email address")
    age: int = Field(..., description="User's age in years")
