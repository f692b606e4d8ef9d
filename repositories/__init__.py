"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.team_member_repository import TeamMemberRepository
from repositories.meal_entry_repository import MealEntryRepository

__all__ = [
    "BaseRepository",
    "TeamMemberRepository",
    "MealEntryRepository",
]
