"""
Document mappers.
Turns raw MongoDB documents (ObjectId, BSON datetimes) into JSON-ready dicts.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from bson import ObjectId


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    pymongo hands back naive datetimes that already hold UTC wall time.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return as_utc(value).strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class DocumentMapper:
    """Mapper for stored documents."""

    @staticmethod
    def to_json(value: Any) -> Any:
        """Recursively convert BSON-only types to JSON-serializable ones."""
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, datetime):
            return isoformat_utc(value)
        if isinstance(value, Mapping):
            return {k: DocumentMapper.to_json(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [DocumentMapper.to_json(v) for v in value]
        return value

    @staticmethod
    def to_food_log_response(doc: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Convert a stored food-log document for the client.

        Keeps every stored field and adds ``id`` (string form of ``_id``);
        ``timestamp`` becomes an ISO-8601 string.
        """
        payload = DocumentMapper.to_json(doc)
        payload["id"] = str(doc["_id"])
        return payload
