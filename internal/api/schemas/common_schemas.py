"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic failure message shown to the user."""

    message: str

    class Config:
        json_schema_extra = {
            "examples": [{"message": "Failed to add task. Please try again."}]
        }


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    service: str
    version: str
    database: str

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "status": "healthy",
                    "service": "Task Tracker",
                    "version": "1.0.0",
                    "database": "connected",
                }
            ]
        }
