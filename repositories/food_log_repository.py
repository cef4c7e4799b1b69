"""
Food Log Repository - Data access layer for food-log entries
"""

from typing import Any, Dict, Iterator, List

from pymongo import DESCENDING

from adapters.mongo_adapter import FOOD_LOG
from repositories.base import BaseRepository

NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fat")


class FoodLogRepository(BaseRepository):
    """Repository for food-log entries; entries are never updated"""

    collection_name = FOOD_LOG

    def find_by_email_newest_first(self, email: str) -> List[Dict[str, Any]]:
        """All entries for a user, most recent timestamp first"""
        return list(
            self.collection.find({"email": email}).sort("timestamp", DESCENDING)
        )

    def iter_nutrients(self, email: str) -> Iterator[Dict[str, Any]]:
        """Stream timestamp and nutrient totals of every entry for a user"""
        projection = {"_id": 0, "timestamp": 1}
        projection.update({field: 1 for field in NUTRIENT_FIELDS})
        return self.collection.find({"email": email}, projection)
