"""
Health Check API Routes.
"""

from fastapi import APIRouter, Depends

from core.database import MongoDB
from internal.api.dependencies import get_database
from internal.api.schemas import HealthResponse


def create_health_routes() -> APIRouter:
    """
    Factory function to create health routes.

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check service and database health",
        operation_id="health_check",
    )
    async def health_check(database: MongoDB = Depends(get_database)):
        """
        Health check endpoint.

        **Returns:**
        - Overall health status
        - Service name and version
        - Database connectivity (connected / disconnected)
        """
        settings = database.settings
        db_healthy = await database.health_check()

        return HealthResponse(
            status="healthy" if db_healthy else "degraded",
            service=settings.app_name,
            version=settings.app_version,
            database="connected" if db_healthy else "disconnected",
        )

    return router
