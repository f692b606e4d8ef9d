"""
Domain enums for MealTracker.
Contains the meal type enumeration and the canonical price table.
"""

import enum


class MealType(str, enum.Enum):
    """Meal ordered by a team member on a given day"""

    CHICKEN = "CHICKEN"
    VEG = "VEG"
    NONE = "NONE"


# Canonical price per meal type; cost is always derived from this table
MEAL_PRICES = {
    MealType.CHICKEN: 220,
    MealType.VEG: 120,
    MealType.NONE: 0,
}


def price_for(meal_type: MealType) -> int:
    """Return the canonical cost of a meal type."""
    return MEAL_PRICES[MealType(meal_type)]
