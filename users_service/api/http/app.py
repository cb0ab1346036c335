"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from users_service import __version__
from users_service.api.http.app_data import ApplicationDependencies
from users_service.api.http.errors import (
    register_exception_handlers,
    unexpected_error_response,
)
from users_service.api.http.routers import health, users
from users_service.api.utils.app_startup import configure_logging
from users_service.core.services import DbSessionService
from users_service.runtime.config.config_data import ConfigData
from users_service.runtime.context import get_config


def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Construct the process-wide services once, at startup."""
    database_service = DbSessionService(config)
    if config.database.create_tables:
        database_service.create_all()
    return ApplicationDependencies(config=config, database_service=database_service)


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=400,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            response = unexpected_error_response(request, exc)
            response.headers["X-Request-ID"] = request_id
            return response


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the FastAPI application for ``config`` (the active configuration by default)."""
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up application in {} environment", config.app.environment)
        app.state.app_dependencies = build_dependencies(config)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            app.state.app_dependencies.database_service.dispose()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="Users Service",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router, prefix=config.app.api_prefix)

    return app


configure_logging()

app = create_app()

__all__ = ["app", "create_app", "build_dependencies"]
