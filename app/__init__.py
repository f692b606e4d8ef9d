"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, Settings
from app.exceptions import (
    MealTrackerError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "settings",
    "Settings",
    "MealTrackerError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
]
