"""
Interface for Task Repository.
Defines the contract that all task repositories must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import TaskModel


class ITaskRepository(ABC):
    """Interface for task repository operations."""

    @abstractmethod
    async def list_tasks_newest_first(self) -> List[TaskModel]:
        """
        Get every stored task, newest first.

        Returns:
            List[TaskModel]: All tasks ordered by creation time descending

        Raises:
            RepositoryError: If the store cannot be reached or queried
        """
        pass

    @abstractmethod
    async def create_task(
        self, title: str, description: Optional[str] = None
    ) -> TaskModel:
        """
        Validate and store a new task.

        Args:
            title: Task title, required and non-empty after trimming
            description: Optional description, defaults to empty string

        Returns:
            TaskModel: The stored task with its new id

        Raises:
            ValidationError: If the input is invalid; nothing is written
            RepositoryError: If the write fails
        """
        pass
