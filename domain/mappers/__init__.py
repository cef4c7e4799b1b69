"""
Domain mappers package.
Handles transformation between stored MongoDB documents and JSON responses.
"""

from domain.mappers.document_mapper import DocumentMapper

__all__ = ["DocumentMapper"]
