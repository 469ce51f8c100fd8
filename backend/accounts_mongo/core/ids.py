"""
User identifier conversion helpers.
"""
from typing import Union

from bson import ObjectId
from bson.errors import InvalidId

from accounts_mongo.core.exceptions import InvalidUserIdError


def to_mongo_id(user_id: Union[str, ObjectId]) -> ObjectId:
    """
    Convert a user id to a MongoDB ObjectId.

    Args:
        user_id: ObjectId as a 24 character hex string, or an ObjectId

    Returns:
        ObjectId instance

    Raises:
        InvalidUserIdError: If the string is not a valid ObjectId
    """
    if isinstance(user_id, ObjectId):
        return user_id
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError) as e:
        raise InvalidUserIdError(details={"user_id": str(user_id)}) from e
