from contextlib import asynccontextmanager
from fastapi import FastAPI

from infrastructure.di import get_user_repository
from utils.logging_config import setup_logger

# Setup logger
logger = setup_logger("lifespan", "lifespan.log")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI application.

    Loads the shared mock user repository once at startup; routes receive the
    same cached instance through ``get_user_repository``.

    Args:
        app: FastAPI application instance
    """
    try:
        repository = get_user_repository()
        logger.info(f"User repository ready with {len(repository.users)} mock users")
    except Exception as e:
        logger.error(f"Error initializing user repository: {e}")
        raise

    yield  # Application runs here

    logger.info(f"{app.title} shutting down")
