"""
FastAPI application setup for the trip planner admin backend.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripadmin.admin.registry import default_registry
from tripadmin.admin.router import build_admin_router
from tripadmin.api import auth_router
from tripadmin.config import get_settings
from tripadmin.core.error_handlers import error_handler, setup_error_handlers
from tripadmin.core.logging import configure_logging
from tripadmin.middleware import RequestContextMiddleware

settings = get_settings()

configure_logging(
    level=settings.log_level.value,
    json_format=settings.log_json,
    fmt=settings.log_format,
    log_file=settings.log_file,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    yield
    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(CORSMiddleware, **settings.get_cors_config())
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(build_admin_router(default_registry))

    @app.get("/")
    async def root():
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "admin": settings.admin.path,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "environment": settings.environment.value,
            "errors": error_handler.get_error_statistics(),
        }

    return app


app = create_app()
