"""
API Dependencies.
"""

from .task_dependencies import get_database, get_task_service

__all__ = [
    "get_database",
    "get_task_service",
]
