"""
Repository Interfaces.
"""

from .task_repository_interface import ITaskRepository

__all__ = [
    "ITaskRepository",
]
