"""
API Schemas (Request/Response Models).
"""

from .common_schemas import HealthResponse, MessageResponse
from .task_schemas import FieldErrorsResponse, TaskItem, TaskListResponse

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "FieldErrorsResponse",
    "TaskItem",
    "TaskListResponse",
]
