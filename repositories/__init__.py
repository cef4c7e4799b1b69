"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.profile_repository import ProfileRepository
from repositories.allergen_repository import AllergenRepository
from repositories.meal_plan_repository import MealPlanRepository
from repositories.food_log_repository import FoodLogRepository

__all__ = [
    "BaseRepository",
    "ProfileRepository",
    "AllergenRepository",
    "MealPlanRepository",
    "FoodLogRepository",
]
