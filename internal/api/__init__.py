"""
API Module.
Contains routes, schemas, and API-related dependencies.
"""

from . import dependencies
from . import routes
from . import schemas

__all__ = [
    "dependencies",
    "routes",
    "schemas",
]
