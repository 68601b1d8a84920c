"""
Utilities for MongoDB ObjectId conversion.
"""

from typing import Optional, Union

from bson import ObjectId
from bson.errors import InvalidId


def objectid_to_str(obj_id: Union[ObjectId, str, None]) -> Optional[str]:
    """
    Convert ObjectId to its 24-character hex string.

    Args:
        obj_id: ObjectId instance, string, or None

    Returns:
        String representation of ObjectId, or None if input is None

    Raises:
        ValueError: If a string input is not a valid ObjectId
        TypeError: If the input is of any other type

    Examples:
        >>> objectid_to_str(ObjectId("507f1f77bcf86cd799439011"))
        '507f1f77bcf86cd799439011'
        >>> objectid_to_str(None)
    """
    if obj_id is None:
        return None

    if isinstance(obj_id, ObjectId):
        return str(obj_id)

    if isinstance(obj_id, str):
        try:
            return str(ObjectId(obj_id))
        except InvalidId:
            raise ValueError(f"Invalid ObjectId string: {obj_id}")

    raise TypeError(f"Cannot convert {type(obj_id)} to ObjectId string")
