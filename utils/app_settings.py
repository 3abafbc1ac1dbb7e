import logging
from limits import parse_many
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Configuration settings model using Pydantic for validation.
    Loads configuration from environment variables and .env file.
    """

    # Basic settings
    name: str = Field(default="User API", description="Name of the application")
    description: str = Field(
        default="A sample user API with interactive Swagger documentation",
        description="Application description shown in the API docs",
    )
    version: str = Field(default="1.0", description="Application version")
    debug_mode: bool = Field(
        default=False,
        description="Reload the server on code changes; errors are still rendered as JSON",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host address")
    port: int = Field(default=3000, description="Server port")
    api_prefix: str = Field(default="/api/v1", description="Prefix for all API routes")

    # Logging settings
    file_log_level: str = Field(default="INFO", description="Logging level")
    screen_log_level: str = Field(default="WARNING", description="Logging level")

    # Rate limit settings
    rate_limit: str = Field(default="200/minute", description="Rate limit per client on each user route")
    rate_limit_enabled: bool = Field(default=True, description="Enable rate limiting")

    @field_validator("api_prefix")
    def validate_api_prefix(cls, v):
        if not v.startswith("/") or v.endswith("/"):
            raise ValueError("api_prefix must start with '/' and must not end with '/'")
        return v

    @field_validator("rate_limit")
    def validate_rate_limit(cls, v):
        try:
            parse_many(v)
        except ValueError:
            raise ValueError(f"Invalid rate limit: {v}")
        return v

    @field_validator("file_log_level", "screen_log_level")
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        """Pydantic configuration."""
        env_prefix = "APP_"  # Environment variables prefix
        case_sensitive = False
        validate_assignment = True
        extra = "ignore"  # Ignore extra attributes
        env_file = ".env"  # Specify the .env file to load
        env_file_encoding = "utf-8"
