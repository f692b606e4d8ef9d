"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database, build_engine
from domain.models.team_member import TeamMember, MealEntry

__all__ = [
    # Database
    "Base",
    "Database",
    "build_engine",
    # Models
    "TeamMember",
    "MealEntry",
]
