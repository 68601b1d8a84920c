"""
Application error taxonomy.
Routes translate these into HTTP responses; nothing below the API layer
knows about status codes.
"""

from typing import Optional


class TaskTrackerError(Exception):
    """Base class for all application errors."""


class ConfigurationError(TaskTrackerError):
    """Settings are missing or invalid. Fatal at startup."""


class ValidationError(TaskTrackerError):
    """Caller-supplied input failed a precondition. Nothing was written."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    def to_dict(self) -> dict:
        return {self.field: self.message}


class DatabaseConnectionError(TaskTrackerError):
    """A connection attempt to MongoDB failed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RepositoryError(TaskTrackerError):
    """A query or write could not be completed."""
