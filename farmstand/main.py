from contextlib import asynccontextmanager

import sentry_sdk
import structlog
import uvicorn
from fastapi import FastAPI
from sentry_sdk.integrations.starlette import StarletteIntegration

from farmstand.api import errors
from farmstand.api.routers.dog import router as dog_router
from farmstand.api.routers.healthz import router as healthz_router
from farmstand.api.routers.products import router as products_router
from farmstand.api.routers.readyz import router as readyz_router
from farmstand.core.config import Settings, get_settings
from farmstand.db import Database
from farmstand.logging import setup_logging
from farmstand.middleware import (
    method_override_middleware,
    request_id_middleware,
    security_headers_middleware,
)


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger = structlog.get_logger(__name__)
        database = Database(settings.database_url)
        database.connect()
        if settings.auto_create_schema:
            try:
                await database.create_schema()
            except Exception:
                # Keep serving; /readyz reports the store as unavailable
                logger.exception("database_connection_error")
        app.state.database = database
        try:
            yield
        finally:
            await database.dispose()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    # Initialize structured logging first
    setup_logging(settings.log_level, settings.log_format, settings.app_env)

    # Initialize Sentry (no-op if DSN is missing)
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.app_env,
            release=settings.release,
            integrations=[StarletteIntegration()],
            traces_sample_rate=settings.traces_sample_rate,
            send_default_pii=False,
        )

    app = FastAPI(title="Farm Stand", lifespan=_lifespan(settings))
    app.state.settings = settings

    # Request-ID middleware (JSON access log)
    app.middleware("http")(request_id_middleware)
    # Security headers
    app.middleware("http")(security_headers_middleware)
    # Verb override for HTML forms; outermost so routing and logs see the new method
    app.middleware("http")(method_override_middleware)

    errors.install(app)

    app.include_router(products_router)
    app.include_router(dog_router)
    app.include_router(healthz_router)
    app.include_router(readyz_router)

    structlog.get_logger(__name__).info("app_startup", env=settings.app_env)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    structlog.get_logger(__name__).info("app_listening", host=settings.host, port=settings.port)
    uvicorn.run("farmstand.main:app", host=settings.host, port=settings.port)
