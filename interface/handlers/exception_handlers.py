from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from interface.constants import MSG_INTERNAL_ERROR
from interface.schemas import ErrorResponse
from utils.logging_config import setup_logger

logger = setup_logger("exception_handlers", "errors.log")


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_json(error: str, message: str, status_code: int, headers=None) -> JSONResponse:
    """Render an ErrorResponse body with the given status code."""
    return JSONResponse(
        content=ErrorResponse(error=error, message=message).model_dump(),
        status_code=status_code,
        headers=headers
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors, including unknown routes and wrong methods, as ErrorResponse."""
    return error_json(
        error=_status_phrase(exc.status_code),
        message=str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {request.client.host if request.client else 'unknown'}: {exc.detail}")
    return error_json(
        error=_status_phrase(status.HTTP_429_TOO_MANY_REQUESTS),
        message=f"Rate limit exceeded: {exc.detail}",
        status_code=status.HTTP_429_TOO_MANY_REQUESTS
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error in {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_json(
        error=_status_phrase(status.HTTP_500_INTERNAL_SERVER_ERROR),
        message=MSG_INTERNAL_ERROR,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
