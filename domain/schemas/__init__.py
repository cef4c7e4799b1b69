"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.common import OwnerEmail, OwnedDocument, MessageResponse
from domain.schemas.profile_schemas import ProfileDocument, ProfileExistsResponse
from domain.schemas.allergen_schemas import AllergenCreate
from domain.schemas.meal_plan_schemas import MealPlanCreate
from domain.schemas.food_log_schemas import (
    FoodLogCreate,
    DailyNutrition,
)
from domain.schemas.upload_schemas import UploadResponse

__all__ = [
    # Shared
    "OwnerEmail",
    "OwnedDocument",
    "MessageResponse",
    # Profile schemas
    "ProfileDocument",
    "ProfileExistsResponse",
    # Allergen and meal plan schemas
    "AllergenCreate",
    "MealPlanCreate",
    # Food log schemas
    "FoodLogCreate",
    "DailyNutrition",
    # Upload schemas
    "UploadResponse",
]
