"""Food log and weekly nutrition routes"""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
import logging

from api.dependencies import get_db
from domain.schemas.common import MessageResponse
from domain.schemas.food_log_schemas import DailyNutrition, FoodLogCreate
from services import FoodLogService, NutritionService

router = APIRouter(prefix="/api", tags=["Food Log"])
logger = logging.getLogger("nutritrack.api.foodlog")


@router.post(
    "/foodlog", response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
def log_food(entry: FoodLogCreate, db: Database = Depends(get_db)):
    """
    Log a dish for a user.

    All fields are required and must be non-empty and non-zero. The entry is
    timestamped by the server.

    Raises:
        400: If any field is missing or falsy
        500: If the entry cannot be saved
    """
    FoodLogService.log_food(db, entry)
    logger.info("Logged %s for user %s", entry.dishName, entry.email)
    return MessageResponse(message="Food log saved successfully.")


@router.get("/foodlog", response_model=List[Dict[str, Any]])
def list_food_logs(
    email: Optional[str] = Query(None, description="Owner email"),
    db: Database = Depends(get_db),
):
    """Get a user's food log, newest first"""
    logs = FoodLogService.list_food_logs(db, email)
    logger.info("Found %d food log entries for user %s", len(logs), email)
    return logs


@router.get("/weeklycalo", response_model=List[DailyNutrition])
def weekly_calories(
    email: Optional[str] = Query(None, description="Owner email"),
    db: Database = Depends(get_db),
):
    """
    Nutrient totals per weekday over the user's entire food log.

    Always returns seven rows, Sun through Sat. Entries from different weeks
    that fall on the same weekday are summed together; protein, carbs and
    fat are rounded to whole grams.

    Example response:
        [{"day": "Sun", "calories": 0, "protein": 0, "carbs": 0, "fat": 0},
         {"day": "Mon", "calories": 850, "protein": 42, "carbs": 96, "fat": 30},
         ...]
    """
    return NutritionService.weekly_summary(db, email)
