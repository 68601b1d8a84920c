"""
Core module containing configuration, logging, errors and the database connection.
"""

from .config import Settings, get_settings
from .errors import (
    ConfigurationError,
    DatabaseConnectionError,
    RepositoryError,
    TaskTrackerError,
    ValidationError,
)
from .logger import logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "TaskTrackerError",
    "ConfigurationError",
    "ValidationError",
    "DatabaseConnectionError",
    "RepositoryError",
]
