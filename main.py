from typing import Optional

import uvicorn
from fastapi import FastAPI, status
from fastapi.responses import JSONResponse, RedirectResponse

from lifespan import lifespan

from interface.handlers import register_exception_handlers
from interface.middleware import add_cors_middleware, network_logging_middleware
from interface.rate_limit import configure_limiter
from interface.routers import user_router

from utils import AppSettings, CorsSettings
from utils.logging_config import setup_logger

SWAGGER_UI_URL = "/swagger/index.html"
OPENAPI_URL = "/swagger/doc.json"


def create_app(
    app_settings: Optional[AppSettings] = None,
    cors_settings: Optional[CorsSettings] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Application settings; loaded from the environment when omitted.
        cors_settings: CORS settings; loaded from the environment when omitted.
    """
    app_settings = app_settings or AppSettings()
    cors_settings = cors_settings or CorsSettings()

    logger = setup_logger(
        "main",
        "main.log",
        file_level=app_settings.file_log_level,
        screen_level=app_settings.screen_log_level,
    )

    # debug stays off: Starlette's debug mode renders 500s as plain-text tracebacks
    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        terms_of_service="http://swagger.io/terms/",
        contact={"name": "API Support", "email": "support@swagger.io"},
        license_info={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
        docs_url=SWAGGER_UI_URL,
        openapi_url=OPENAPI_URL,
        redoc_url=None,
        lifespan=lifespan,
    )

    # API routers
    app.include_router(user_router, prefix=app_settings.api_prefix)

    # Rate limits are applied by the route decorators
    app.state.limiter = configure_limiter(app_settings)
    register_exception_handlers(app)

    # Middleware added last runs first: CORS wraps request logging
    app.middleware("http")(network_logging_middleware)
    add_cors_middleware(app, cors_settings)

    @app.get("/", include_in_schema=False)
    async def read_root():
        """API root endpoint."""
        return JSONResponse(
            content={"message": f"Welcome to {app_settings.name}"},
            status_code=status.HTTP_200_OK
        )

    @app.get("/swagger", include_in_schema=False)
    @app.get("/swagger/", include_in_schema=False)
    async def swagger_redirect():
        return RedirectResponse(url=SWAGGER_UI_URL)

    logger.info(
        f"{app_settings.name} {app_settings.version} configured with API prefix "
        f"{app_settings.api_prefix}, docs at {SWAGGER_UI_URL}"
    )
    return app


app = create_app()


if __name__ == "__main__":
    settings = AppSettings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug_mode,
    )
