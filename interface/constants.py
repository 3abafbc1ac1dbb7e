from typing import Any, Dict, Final

from interface.schemas import CreateUserRequest, ErrorResponse

# Response Messages
MSG_USER_NOT_FOUND: Final[str] = "User not found"
MSG_INVALID_JSON: Final[str] = "Invalid JSON format"
MSG_INTERNAL_ERROR: Final[str] = "An unexpected error occurred"
MSG_USER_CREATED: Final[str] = "User created successfully"
MSG_USER_UPDATED: Final[str] = "User updated successfully"
MSG_USER_DELETED: Final[str] = "User deleted successfully"

# User Router Responses
RESPONSE_400: Final[Dict[str, Any]] = {
    "model": ErrorResponse,
    "description": "Bad Request",
    "content": {
        "application/json": {
            "example": {
                "error": "Bad Request",
                "message": MSG_INVALID_JSON
            }
        }
    }
}
RESPONSE_404: Final[Dict[str, Any]] = {
    "model": ErrorResponse,
    "description": "Not found",
    "content": {
        "application/json": {
            "example": {
                "error": "Not Found",
                "message": MSG_USER_NOT_FOUND
            }
        }
    }
}
RESPONSE_429: Final[Dict[str, Any]] = {
    "model": ErrorResponse,
    "description": "Too Many Requests",
    "content": {
        "application/json": {
            "example": {
                "error": "Too Many Requests",
                "message": "Rate limit exceeded: 200 per 1 minute"
            }
        }
    }
}
RESPONSE_500: Final[Dict[str, Any]] = {
    "model": ErrorResponse,
    "description": "Internal Server Error",
    "content": {
        "application/json": {
            "example": {
                "error": "Internal Server Error",
                "message": MSG_INTERNAL_ERROR
            }
        }
    }
}

# Documented list parameters; they do not affect the response.
PAGINATION_PARAMETERS: Final[Dict[str, Any]] = {
    "parameters": [
        {
            "name": "page",
            "in": "query",
            "required": False,
            "description": "Page number",
            "schema": {"type": "integer", "default": 1},
        },
        {
            "name": "limit",
            "in": "query",
            "required": False,
            "description": "Number of items per page",
            "schema": {"type": "integer", "default": 10},
        },
    ]
}


def user_request_body(description: str) -> Dict[str, Any]:
    """OpenAPI request body entry carrying the CreateUserRequest schema."""
    return {
        "requestBody": {
            "description": description,
            "required": True,
            "content": {
                "application/json": {
                    "schema": CreateUserRequest.model_json_schema()
                }
            },
        }
    }
