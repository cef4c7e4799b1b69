"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Any, Dict, List, Optional
from abc import ABC

from pymongo.collection import Collection
from pymongo.database import Database


class BaseRepository(ABC):
    """
    Base repository providing owner-scoped operations on one collection.
    Every document is associated with a user through its ``email`` field.
    """

    collection_name: str = ""

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = db[self.collection_name]

    def find_by_email(self, email: str) -> List[Dict[str, Any]]:
        """All documents owned by ``email``, in natural order"""
        return list(self.collection.find({"email": email}))

    def find_one_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"email": email})

    def exists_for_email(self, email: str) -> bool:
        """Check if any document is owned by ``email``"""
        return self.collection.count_documents({"email": email}, limit=1) > 0

    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document and return it with its generated ``_id``"""
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document
