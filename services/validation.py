"""Presence checks shared by every owner-scoped operation"""

from typing import Optional

from bson import ObjectId

from app.exceptions import ServiceValidationError


def require_email(email: Optional[str], message: str = "Email is required.") -> str:
    """Return ``email`` or raise before any storage access when it is missing"""
    if not email:
        raise ServiceValidationError(message, code="EMAIL_REQUIRED")
    return email


def parse_object_id(value: str, message: str = "Invalid identifier.") -> ObjectId:
    """Parse a 24-character hex identifier"""
    if not ObjectId.is_valid(value):
        raise ServiceValidationError(message, code="INVALID_ID")
    return ObjectId(value)
