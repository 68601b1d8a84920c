"""
Task repository for MongoDB operations.
Includes logging and error handling for the read and write paths.
"""

from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from core.database import MongoDB
from core.errors import DatabaseConnectionError, RepositoryError
from core.logger import logger
from repositories.interfaces import ITaskRepository
from repositories.models import TaskCreate, TaskModel

# Ties on createdAt fall back to insertion order
NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


class TaskRepository(ITaskRepository):
    """Repository for task database operations."""

    def __init__(self, database: MongoDB, collection_name: Optional[str] = None):
        """
        Initialize task repository.

        Args:
            database: Process-wide connection manager
            collection_name: Collection override, defaults to the configured one
        """
        self.database = database
        self.collection_name = (
            collection_name or database.settings.mongodb_tasks_collection
        )

    async def _get_collection(self):
        try:
            db = await self.database.acquire()
        except DatabaseConnectionError as e:
            raise RepositoryError(f"Database unavailable: {e}") from e
        return db[self.collection_name]

    async def list_tasks_newest_first(self) -> List[TaskModel]:
        """
        Get all tasks ordered by creation time, newest first.

        Returns:
            List of every stored task

        Raises:
            RepositoryError: If the query fails or a document is malformed
        """
        collection = await self._get_collection()

        try:
            logger.debug(f"🔍 Fetching tasks from {self.collection_name}")
            cursor = collection.find({}).sort(NEWEST_FIRST)
            documents = await cursor.to_list(length=None)

        except PyMongoError as e:
            logger.error(f"❌ Failed to fetch tasks: {e}")
            raise RepositoryError(f"Failed to fetch tasks: {e}") from e

        try:
            tasks = [TaskModel.from_dict(doc) for doc in documents]
        except (PydanticValidationError, ValueError, TypeError) as e:
            logger.error(f"❌ Malformed task document in {self.collection_name}: {e}")
            raise RepositoryError(f"Malformed task document: {e}") from e

        logger.debug(f"Found {len(tasks)} tasks")
        return tasks

    async def create_task(
        self, title: str, description: Optional[str] = None
    ) -> TaskModel:
        """
        Create a new task.

        Args:
            title: Task title
            description: Optional task description

        Returns:
            Created TaskModel

        Raises:
            ValidationError: If the title is missing, not text, or blank
            RepositoryError: If the insert fails
        """
        task = TaskCreate.parse(title, description).to_model()
        collection = await self._get_collection()

        try:
            logger.info(f"📝 Creating new task: title={task.title!r}")
            result = await collection.insert_one(task.to_dict())

        except PyMongoError as e:
            logger.error(f"❌ Failed to create task: {e}")
            raise RepositoryError(f"Failed to create task: {e}") from e

        task.id = str(result.inserted_id)
        logger.info(f"✅ Task created successfully: id={task.id}")
        return task
