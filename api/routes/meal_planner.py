"""Meal planner routes"""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
import logging

from api.dependencies import get_db
from domain.schemas.meal_plan_schemas import MealPlanCreate
from services import MealPlanService

router = APIRouter(prefix="/api/mealPlanner", tags=["Meal Planner"])
logger = logging.getLogger("nutritrack.api.meal_planner")


@router.get("", response_model=List[Dict[str, Any]])
def list_meal_plans(
    email: Optional[str] = Query(None, description="Owner email"),
    db: Database = Depends(get_db),
):
    """Get all meal plans for a user"""
    plans = MealPlanService.list_meal_plans(db, email)
    logger.info("Found %d meal plans for user %s", len(plans), email)
    return plans


@router.post("", status_code=status.HTTP_201_CREATED)
def add_meal_plan(meal: MealPlanCreate, db: Database = Depends(get_db)):
    """Save a meal plan and echo it back"""
    return MealPlanService.add_meal_plan(db, meal)
