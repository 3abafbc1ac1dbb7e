from .user_usecase import UserUseCase, CREATED_USER_ID, UPDATED_USER_ID

__all__ = [
    "UserUseCase",
    "CREATED_USER_ID",
    "UPDATED_USER_ID",
]
