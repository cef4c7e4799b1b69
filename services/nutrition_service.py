"""
Weekly nutrition summary.

Food-log entries are bucketed by the weekday of their UTC calendar date,
merging every week on record, and summed per nutrient. The result always has
one row per weekday, Sunday first, with zeros for days that have no entries.
"""

from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
import logging

from pymongo.database import Database
from pymongo.errors import PyMongoError

from domain.enums import Weekday
from domain.mappers.document_mapper import as_utc
from domain.schemas.food_log_schemas import DailyNutrition
from repositories import FoodLogRepository
from repositories.food_log_repository import NUTRIENT_FIELDS
from services.validation import require_email
from app.exceptions import UpstreamServiceError

logger = logging.getLogger("nutritrack.nutrition")

ROUNDED_FIELDS = ("protein", "carbs", "fat")


def day_of_week(timestamp: datetime) -> int:
    """Weekday of the UTC calendar date, Sunday=1 ... Saturday=7"""
    return as_utc(timestamp).isoweekday() % 7 + 1


def round_half_away(value) -> int:
    """10.4 -> 10, 10.5 -> 11, 10.6 -> 11"""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _numeric(value) -> Any:
    # Non-numeric values do not contribute to a sum.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


class NutritionService:
    """Aggregates logged nutrients into a weekly pattern"""

    @staticmethod
    def bucket_by_weekday(entries: Iterable[Dict[str, Any]]) -> Dict[int, Dict[str, Any]]:
        """
        Sum nutrients per weekday index.

        Entries without a datetime ``timestamp`` cannot be placed on a weekday
        and are left out. Protein, carbs and fat totals are rounded to whole
        numbers; calories are kept as summed.
        """
        buckets: Dict[int, Dict[str, Any]] = {}
        for entry in entries:
            timestamp = entry.get("timestamp")
            if not isinstance(timestamp, datetime):
                continue
            totals = buckets.setdefault(
                day_of_week(timestamp), {field: 0 for field in NUTRIENT_FIELDS}
            )
            for field in NUTRIENT_FIELDS:
                totals[field] += _numeric(entry.get(field))

        for totals in buckets.values():
            for field in ROUNDED_FIELDS:
                totals[field] = round_half_away(totals[field])
        return buckets

    @staticmethod
    def summarize_week(entries: Iterable[Dict[str, Any]]) -> List[DailyNutrition]:
        """Seven rows, Sun..Sat, zero-filled where a weekday has no entries"""
        buckets = NutritionService.bucket_by_weekday(entries)
        result = []
        for day in Weekday:
            totals = buckets.get(day.index)
            if totals is None:
                result.append(DailyNutrition(day=day.value))
            else:
                result.append(DailyNutrition(day=day.value, **totals))
        return result

    @staticmethod
    def weekly_summary(db: Database, email: Optional[str]) -> List[DailyNutrition]:
        """
        Weekly nutrition pattern for a user over all logged history.

        Raises:
            ServiceValidationError: if email is missing (no query is issued)
            UpstreamServiceError: if reading the food log fails
        """
        email = require_email(email)
        try:
            entries = FoodLogRepository(db).iter_nutrients(email)
            summary = NutritionService.summarize_week(entries)
        except PyMongoError as e:
            logger.exception(f"Error fetching weekly data for {email}: {e}")
            raise UpstreamServiceError("Failed to fetch weekly data") from e

        logger.info(
            f"weekly_summary email={email} "
            f"active_days={sum(1 for d in summary if d.calories)}"
        )
        return summary
