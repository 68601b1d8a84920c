"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .models import TaskCreate, TaskModel
from .task_repository import TaskRepository

__all__ = [
    "TaskCreate",
    "TaskModel",
    "TaskRepository",
]
