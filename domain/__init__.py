"""
Domain layer - Record types, enums, and document mappers.
"""

from domain import enums, schemas, mappers

__all__ = ["enums", "schemas", "mappers"]
