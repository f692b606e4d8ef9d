"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.team_member_schemas import (
    TeamMemberCreate,
    TeamMemberUpdate,
    TeamMemberResponse,
    TeamMemberSummary,
    MealEntryResponse,
    MemberStatsResponse,
)
from domain.schemas.meal_schemas import (
    MealUpsertRequest,
    MealWithMemberResponse,
    DailyTotals,
    DailyTotalsResponse,
    MemberStats,
    WeeklyTotalResponse,
    DashboardSummaryResponse,
)

__all__ = [
    # Team member schemas
    "TeamMemberCreate",
    "TeamMemberUpdate",
    "TeamMemberResponse",
    "TeamMemberSummary",
    "MealEntryResponse",
    "MemberStatsResponse",
    # Meal schemas
    "MealUpsertRequest",
    "MealWithMemberResponse",
    "DailyTotals",
    "DailyTotalsResponse",
    "MemberStats",
    "WeeklyTotalResponse",
    "DashboardSummaryResponse",
]
