from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils.cors_settings import CorsSettings


def add_cors_middleware(app: FastAPI, cors_settings: CorsSettings) -> None:
    """Allow cross-origin requests as configured; any origin by default."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_settings.allowed_origins,
        allow_credentials=cors_settings.allow_credentials,
        allow_methods=cors_settings.allowed_methods,
        allow_headers=cors_settings.allowed_headers,
        expose_headers=cors_settings.expose_headers,
        max_age=cors_settings.max_age,
    )
