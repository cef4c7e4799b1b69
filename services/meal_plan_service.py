from typing import Any, Dict, List, Optional
import logging

from pymongo.database import Database
from pymongo.errors import WriteError

from domain.mappers import DocumentMapper
from domain.schemas.meal_plan_schemas import MealPlanCreate
from repositories import MealPlanRepository
from services.validation import require_email
from app.exceptions import ServiceValidationError

logger = logging.getLogger("nutritrack.meal_planner")


class MealPlanService:
    """Business logic for meal plans"""

    @staticmethod
    def list_meal_plans(db: Database, email: Optional[str]) -> List[Dict[str, Any]]:
        email = require_email(email, "Email is required to fetch meal plans.")
        return DocumentMapper.to_json(MealPlanRepository(db).find_by_email(email))

    @staticmethod
    def add_meal_plan(db: Database, meal: MealPlanCreate) -> Dict[str, Any]:
        try:
            document = MealPlanRepository(db).insert(meal.to_document())
        except WriteError as e:
            logger.warning(f"meal_plan_insert_rejected email={meal.email}: {e}")
            raise ServiceValidationError(str(e)) from e

        logger.info(f"meal_plan_added email={meal.email} id={document['_id']}")
        return DocumentMapper.to_json(document)
