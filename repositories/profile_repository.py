"""
Profile Repository - Data access layer for user profiles
"""

from typing import Any, Dict

from adapters.mongo_adapter import PROFILE
from repositories.base import BaseRepository


class ProfileRepository(BaseRepository):
    """Repository for profile documents, at most one per email"""

    collection_name = PROFILE

    def upsert(self, profile: Dict[str, Any]) -> bool:
        """
        Replace the profile stored for ``profile["email"]`` or insert it.

        Returns:
            True if a new document was inserted, False if one was replaced

        Raises:
            pymongo.errors.DuplicateKeyError: when a concurrent upsert for the
            same email won the race on the unique index
        """
        result = self.collection.replace_one(
            {"email": profile["email"]}, profile, upsert=True
        )
        return result.upserted_id is not None
