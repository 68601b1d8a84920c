"""
Interface for Task Service.
Defines the contract that all task services must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from repositories.models import TaskModel


class ITaskService(ABC):
    """Interface for task service operations."""

    @abstractmethod
    async def load_tasks(self) -> Dict:
        """
        Read path: every task, newest first.

        Returns:
            Dict: ``{"tasks": [{"id", "title", "description", "createdAt"}, ...]}``
        """
        pass

    @abstractmethod
    async def add_task(self, title: str, description: Optional[str] = None) -> TaskModel:
        """
        Write path: validate and store a new task.

        Args:
            title: Task title
            description: Optional task description

        Returns:
            TaskModel: The stored task
        """
        pass
