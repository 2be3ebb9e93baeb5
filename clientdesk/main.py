"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clientdesk.config import Settings, get_settings
from clientdesk.domain.models.base import ConfigurationError
from clientdesk.infrastructure.db.supabase import SupabaseDatabase
from clientdesk.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware, configuration_error_handler
)
from clientdesk.infrastructure.web.routers import clients, projects

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.effective_log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    """
    app_settings: Settings = app.state.settings
    logger.info("Starting %s v%s", app_settings.api_title, app_settings.api_version)
    logger.info("Environment: %s", app_settings.environment)

    missing = app_settings.missing_store_settings()
    if missing:
        logger.warning("Supabase is not configured (missing %s); data requests will fail", ", ".join(missing))

    yield

    logger.info("Shutting down application")


def create_application(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app_settings = app_settings or get_settings()

    app = FastAPI(
        title=app_settings.api_title,
        version=app_settings.api_version,
        debug=app_settings.debug,
        docs_url=f"{app_settings.api_prefix}/docs" if app_settings.debug else None,
        redoc_url=f"{app_settings.api_prefix}/redoc" if app_settings.debug else None,
        openapi_url=f"{app_settings.api_prefix}/openapi.json" if app_settings.debug else None,
        lifespan=lifespan
    )
    app.state.settings = app_settings
    app.state.database = SupabaseDatabase(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ErrorHandlerMiddleware)

    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    app.include_router(
        clients.router,
        prefix=f"{app_settings.api_prefix}/clients",
        tags=["Clients"]
    )
    app.include_router(
        projects.router,
        prefix=f"{app_settings.api_prefix}/projects",
        tags=["Projects"]
    )

    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": app_settings.api_title,
            "version": app_settings.api_version,
            "environment": app_settings.environment,
            "docs": f"{app_settings.api_prefix}/docs" if app_settings.debug else None,
            "health": f"{app_settings.api_prefix}/health"
        }

    @app.get(f"{app_settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": app_settings.environment,
            "version": app_settings.api_version,
            "store_configured": not app_settings.missing_store_settings(),
        }

    return app


app = create_application(settings)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "clientdesk.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.effective_log_level.lower(),
    )
