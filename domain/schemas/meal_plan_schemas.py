from domain.schemas.common import OwnedDocument


class MealPlanCreate(OwnedDocument):
    """Meal plan entry for a user; plan fields are client-defined"""
