from pydantic import BaseModel, Field, field_validator
from typing import Any, Union
from datetime import datetime

from domain.schemas.common import OwnerEmail

NUMERIC_FIELDS = ("calories", "protein", "carbs", "fat")


class FoodLogCreate(BaseModel):
    """Schema for logging a dish.

    Every field is required and must be truthy: numbers finite and greater
    than zero, everything else non-empty. Numeric strings such as ``"200"``
    are accepted and stored as numbers. Descriptive fields keep whatever
    shape the client sends (a serving size of ``2``, a list of ingredient
    objects). ``timestamp`` is assigned by the server.
    """

    email: OwnerEmail
    dishName: Any
    calories: float = Field(..., gt=0, allow_inf_nan=False, description="Energy in kcal")
    protein: float = Field(..., gt=0, allow_inf_nan=False, description="Protein in grams")
    carbs: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Carbohydrates in grams"
    )
    fat: float = Field(..., gt=0, allow_inf_nan=False, description="Fat in grams")
    ingredients: Any
    servingSize: Any
    healthiness: Any

    @field_validator("dishName", "ingredients", "servingSize", "healthiness")
    @classmethod
    def value_present(cls, v):
        if not v:
            raise ValueError("must not be empty")
        return v

    def to_document(self, timestamp: datetime) -> dict:
        doc = self.model_dump()
        for field in NUMERIC_FIELDS:
            # 200.0 is stored and returned as 200
            if float(doc[field]).is_integer():
                doc[field] = int(doc[field])
        doc["timestamp"] = timestamp
        return doc


class DailyNutrition(BaseModel):
    """Summed nutrients for one weekday across all logged weeks"""

    day: str = Field(..., description="Sun, Mon, Tue, Wed, Thu, Fri or Sat")
    calories: Union[int, float] = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
