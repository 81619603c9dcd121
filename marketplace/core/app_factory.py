"""
FastAPI application factory for the settlement service.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.api.exception_handlers import register_exception_handlers
from marketplace.api.middleware import RequestLoggingMiddleware
from marketplace.api.middleware.logging_middleware import CORRELATION_HEADER
from marketplace.api.router import api_router
from marketplace.config.settings import Settings, get_settings
from marketplace.core.lifecycle import lifespan

logger = logging.getLogger(__name__)

# Browsers only hand these to client code when listed explicitly
EXPOSED_HEADERS = [CORRELATION_HEADER, "X-Response-Time-Ms", "Retry-After"]


class AppFactory:
    """
    Builds the ASGI app: orders and payments routers under API_V1_STR,
    domain error mapping, request logging and a liveness probe.

    Settings are stored on `app.state` so the lifespan uses the same
    instance the app was built with.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def create_app(self) -> FastAPI:
        settings = self._settings
        docs_prefix = settings.API_V1_STR if settings.DEBUG else None

        app = FastAPI(
            title=settings.PROJECT_NAME,
            description=settings.PROJECT_DESCRIPTION,
            version=settings.VERSION,
            docs_url=f"{docs_prefix}/docs" if docs_prefix else None,
            redoc_url=f"{docs_prefix}/redoc" if docs_prefix else None,
            lifespan=lifespan,
        )
        app.state.settings = settings

        self._add_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router, prefix=settings.API_V1_STR)
        self._add_health_endpoint(app)

        logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} created ({settings.ENVIRONMENT})")
        return app

    def _add_middleware(self, app: FastAPI) -> None:
        # Added last runs first: CORS answers preflights before anything is logged
        app.add_middleware(RequestLoggingMiddleware)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"] if self._settings.DEBUG else self._settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=EXPOSED_HEADERS,
        )

    def _add_health_endpoint(self, app: FastAPI) -> None:
        settings = self._settings

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            return {"status": "ok", "environment": settings.ENVIRONMENT, "version": settings.VERSION}


def create_app(settings: Settings | None = None) -> FastAPI:
    return AppFactory(settings).create_app()
