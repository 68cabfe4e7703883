"""
Shared helpers for document-backed models
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def utc_now() -> datetime:
    """Helper function for Pydantic default_factory to get current UTC time"""
    return datetime.now(timezone.utc)


def to_object_id(value) -> Optional[ObjectId]:
    """Parse an id from a path or token; None when it is not a valid ObjectId"""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def normalize_document(doc: dict) -> dict:
    """Copy a MongoDB document with ObjectIds rendered as strings"""
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            doc[key] = str(value)
    return doc
