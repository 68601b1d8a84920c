"""
Task Dependencies.
The connection manager is owned by the application; handlers reach it
through the request instead of a module-level singleton.
"""

from fastapi import Depends, Request

from core.database import MongoDB
from repositories.task_repository import TaskRepository
from services.interfaces import ITaskService
from services.task_service import TaskService


def get_database(request: Request) -> MongoDB:
    """Get the process-wide MongoDB connection manager."""
    return request.app.state.database


def get_task_service(database: MongoDB = Depends(get_database)) -> ITaskService:
    """Get Task Service instance bound to the shared connection."""
    return TaskService(TaskRepository(database))
