"""
Allergen Repository - Data access layer for a user's allergen list
"""

from bson import ObjectId

from adapters.mongo_adapter import ALLERGENS
from repositories.base import BaseRepository


class AllergenRepository(BaseRepository):
    """Repository for allergen documents"""

    collection_name = ALLERGENS

    def delete_by_id(self, allergen_id: ObjectId) -> bool:
        """Delete exactly one allergen; False when nothing matched"""
        result = self.collection.delete_one({"_id": allergen_id})
        return result.deleted_count > 0
