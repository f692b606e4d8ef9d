"""Services package - Business logic layer"""

from services import aggregation_service
from services.team_service import TeamService
from services.meal_service import MealService

# Note: aggregation_service contains pure functions, not a class

__all__ = [
    "aggregation_service",
    "TeamService",
    "MealService",
]
