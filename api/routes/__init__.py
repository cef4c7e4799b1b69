"""API routes package"""

from . import allergens, meal_planner, profiles, food_log, uploads, health

__all__ = ["allergens", "meal_planner", "profiles", "food_log", "uploads", "health"]
