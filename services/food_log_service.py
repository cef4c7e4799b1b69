from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import logging

from pymongo.database import Database
from pymongo.errors import PyMongoError

from domain.mappers import DocumentMapper
from domain.schemas.food_log_schemas import FoodLogCreate
from repositories import FoodLogRepository
from services.validation import require_email
from app.exceptions import UpstreamServiceError

logger = logging.getLogger("nutritrack.foodlog")


class FoodLogService:
    """Business logic for logging dishes"""

    @staticmethod
    def log_food(
        db: Database, entry: FoodLogCreate, now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Store a food-log entry stamped with the current UTC time.

        Field presence is enforced by ``FoodLogCreate``; entries are immutable
        once written.

        Raises:
            UpstreamServiceError: if the insert fails
        """
        timestamp = now or datetime.now(timezone.utc)
        try:
            document = FoodLogRepository(db).insert(entry.to_document(timestamp))
        except PyMongoError as e:
            logger.exception(f"Error saving food log for {entry.email}: {e}")
            raise UpstreamServiceError(
                "Failed to save food log. Please try again later."
            ) from e

        logger.info(
            f"food_logged email={entry.email} dish={entry.dishName!r} "
            f"calories={entry.calories} id={document['_id']}"
        )
        return document

    @staticmethod
    def list_food_logs(db: Database, email: Optional[str]) -> List[Dict[str, Any]]:
        """Entries for ``email``, newest first, each with string ``id`` and ISO ``timestamp``"""
        email = require_email(email, "Email is required to fetch food logs.")
        logs = FoodLogRepository(db).find_by_email_newest_first(email)
        return [DocumentMapper.to_food_log_response(log) for log in logs]
