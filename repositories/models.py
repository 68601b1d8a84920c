"""
MongoDB document models using Pydantic.
Includes validation of the task shape before anything is written.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.errors import ValidationError
from core.logger import logger
from repositories.objectid_utils import objectid_to_str

TITLE_REQUIRED_MESSAGE = "Title is required."
DESCRIPTION_INVALID_MESSAGE = "Description must be text."


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds, the precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def to_iso_timestamp(value: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC string, e.g. 2024-11-02T16:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class TaskModel(BaseModel):
    """Model for a task (MongoDB document)."""

    id: Optional[str] = Field(None, description="MongoDB _id as string")
    title: str = Field(..., min_length=1, description="Task title")
    description: str = Field(default="", description="Optional task description")
    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Task creation time",
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        """
        Convert to dictionary for MongoDB.
        Excludes 'id' field (it is stored as '_id' in MongoDB).
        """
        return self.model_dump(exclude={"id"}, by_alias=True)

    @classmethod
    def from_dict(cls, data: dict) -> "TaskModel":
        """
        Create from MongoDB document.
        Converts MongoDB _id (ObjectId) to string 'id' field.
        """
        data = dict(data)
        if "_id" in data:
            data["id"] = objectid_to_str(data.pop("_id"))
        return cls(**data)

    def to_public_dict(self) -> dict:
        """Serializable representation returned by the read path."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "createdAt": to_iso_timestamp(self.created_at),
        }


class TaskCreate(BaseModel):
    """Model for creating a new task. Trims both fields."""

    title: str
    description: str = ""

    model_config = ConfigDict(strict=True)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(TITLE_REQUIRED_MESSAGE)
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _default_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("description")
    @classmethod
    def _strip_description(cls, value: str) -> str:
        return value.strip()

    @classmethod
    def parse(cls, title: Any, description: Any = None) -> "TaskCreate":
        """
        Validate raw input.

        Raises:
            ValidationError: On the first invalid field, title first
        """
        try:
            return cls(title=title, description=description)
        except PydanticValidationError as e:
            fields = {error["loc"][0] for error in e.errors()}
            if "title" in fields:
                logger.warning(f"⚠️ Rejected task input: title={title!r}")
                raise ValidationError("title", TITLE_REQUIRED_MESSAGE) from e
            logger.warning(f"⚠️ Rejected task input: description={description!r}")
            raise ValidationError("description", DESCRIPTION_INVALID_MESSAGE) from e

    def to_model(self) -> TaskModel:
        return TaskModel(
            title=self.title, description=self.description, created_at=utc_now()
        )
