"""Services package - Business logic layer"""

from services.profile_service import ProfileService
from services.allergen_service import AllergenService
from services.meal_plan_service import MealPlanService
from services.food_log_service import FoodLogService
from services.nutrition_service import NutritionService
from services.upload_service import UploadService

__all__ = [
    "ProfileService",
    "AllergenService",
    "MealPlanService",
    "FoodLogService",
    "NutritionService",
    "UploadService",
]
