"""
Pydantic schemas for the task API.
"""

from typing import Dict, List

from pydantic import BaseModel


class TaskItem(BaseModel):
    """A task as returned by the read path."""

    id: str
    title: str
    description: str
    createdAt: str


class TaskListResponse(BaseModel):
    """Response model for the task list, newest first."""

    tasks: List[TaskItem]

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "tasks": [
                        {
                            "id": "69073cc61dc7aa422463d537",
                            "title": "Buy groceries",
                            "description": "Milk, eggs, bread",
                            "createdAt": "2024-11-02T16:00:00.000Z",
                        }
                    ]
                }
            ]
        }


class FieldErrorsResponse(BaseModel):
    """Field-level validation messages."""

    errors: Dict[str, str]

    class Config:
        json_schema_extra = {
            "examples": [{"errors": {"title": "Title is required."}}]
        }
