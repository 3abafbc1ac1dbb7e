class UserNotFoundError(Exception):
    """Exception raised when a requested user does not exist."""

    def __init__(self, user_id: str, message: str = "User not found"):
        super().__init__(message)
        self.user_id = user_id
        self.message = message
