"""
FastAPI Service - Main entry point for the Task Tracker API.
- Routes are separated into modules
- MongoDB for data persistence, connected lazily on first request
- Comprehensive logging for all operations
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from core.config import Settings, get_settings
from core.database import MongoDB
from core.logger import logger
from internal.api.routes.health_routes import create_health_routes
from internal.api.routes.task_routes import router as task_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    The database connection is opened by the first request that needs it
    and closed here on shutdown.
    """
    settings = app.state.settings
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.debug}")

    yield

    logger.info("========== Shutting down API service ==========")
    try:
        await app.state.database.disconnect()
    except Exception as e:
        logger.error(f"Error disconnecting from MongoDB: {e}")
        logger.exception("MongoDB disconnect error details:")

    logger.info("========== API service stopped successfully ==========")


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[MongoDB] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        settings: Settings override, defaults to the environment
        database: Connection manager override (tests inject one with a fake driver)

    Returns:
        FastAPI: Configured application instance

    Raises:
        ConfigurationError: If MONGODB_URI is not configured
    """
    logger.info("Creating FastAPI application...")
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Minimal task tracker backed by MongoDB.",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Tasks", "description": "List and add tasks."},
            {"name": "Health", "description": "Service and MongoDB health."},
        ],
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # One connection manager per process, shared by every request
    app.state.settings = settings
    app.state.database = database or MongoDB(settings)

    app.include_router(task_router)
    logger.info("✅ Task routes registered")

    app.include_router(create_health_routes())
    logger.info("✅ Health routes registered")

    logger.info("FastAPI application created successfully")
    return app


# Create application instance
app = create_app()


# Run with: python cmd/api/main.py (after pip install -e .)
# or: uvicorn --app-dir cmd/api main:app --host 0.0.0.0 --port 8000 --reload
if __name__ == "__main__":
    import os

    import uvicorn

    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"Reload: {settings.api_reload}")

    # The reloader needs an import string; "cmd" itself would resolve to the stdlib module
    uvicorn.run(
        "main:app" if settings.api_reload else app,
        app_dir=os.path.dirname(os.path.abspath(__file__)),
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level="info" if settings.debug else "warning",
    )
