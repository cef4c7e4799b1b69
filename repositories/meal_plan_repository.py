"""
Meal Plan Repository - Data access layer for meal plans
"""

from adapters.mongo_adapter import MEAL_PLANNER
from repositories.base import BaseRepository


class MealPlanRepository(BaseRepository):
    """Repository for meal plan documents (insert and list only)"""

    collection_name = MEAL_PLANNER
