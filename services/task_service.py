"""
Task service implementing the read and write paths.
"""

import time
from typing import Dict, Optional

from core.errors import RepositoryError, ValidationError
from core.logger import logger
from repositories.interfaces import ITaskRepository
from repositories.models import TaskModel
from services.interfaces import ITaskService


class TaskService(ITaskService):
    """Service for listing and adding tasks."""

    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    async def load_tasks(self) -> Dict:
        """
        Load all tasks for display, newest first.

        Raises:
            RepositoryError: If tasks cannot be loaded
        """
        start_time = time.time()

        try:
            tasks = await self.repository.list_tasks_newest_first()
        except RepositoryError as e:
            logger.error(f"❌ Failed to load tasks: {e}")
            raise

        elapsed_time = time.time() - start_time
        logger.debug(f"Loaded {len(tasks)} tasks in {elapsed_time:.3f}s")
        return {"tasks": [task.to_public_dict() for task in tasks]}

    async def add_task(self, title: str, description: Optional[str] = None) -> TaskModel:
        """
        Add a new task.

        Raises:
            ValidationError: If the input is invalid
            RepositoryError: If the task cannot be stored
        """
        try:
            task = await self.repository.create_task(title, description)
        except ValidationError as e:
            logger.info(f"Task rejected: {e}")
            raise
        except RepositoryError as e:
            logger.error(f"❌ Failed to add task: {e}")
            raise

        logger.info(f"✅ Task added: id={task.id}")
        return task
