from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from domain.enums import MealType
from domain.schemas.team_member_schemas import TeamMemberSummary


class MealUpsertRequest(BaseModel):
    """
    Body for POST /meals.

    team_member_id and date are optional here so that a missing value is
    reported by the service as InvalidInput (400). A null type clears the day.
    """

    team_member_id: Optional[UUID] = None
    date: Optional[str] = None
    type: Optional[MealType] = None
    cost: Optional[int] = None


class MealWithMemberResponse(BaseModel):
    id: UUID
    team_member_id: UUID
    date: str
    type: MealType
    cost: int
    created_at: datetime
    updated_at: datetime
    team_member: TeamMemberSummary

    model_config = {"from_attributes": True}


class DailyTotals(BaseModel):
    """Totals across all team members for one date"""

    total_cost: int = 0
    chicken_count: int = 0
    veg_count: int = 0


class DailyTotalsResponse(DailyTotals):
    date: str
    meals: List[MealWithMemberResponse] = []


class MemberStats(BaseModel):
    total_spent: int = 0
    chicken_meals: int = 0
    veg_meals: int = 0
    total_meals: int = 0
    average_cost_per_meal: int = 0


class WeeklyTotalResponse(BaseModel):
    """Sunday-to-Saturday window containing the reference date"""

    reference_date: str
    week_start: str
    week_end: str
    total_cost: int


class DashboardSummaryResponse(BaseModel):
    """Figures shown on the daily dashboard"""

    date: str
    member_count: int
    total_cost: int
    chicken_count: int
    veg_count: int
    total_meals: int
    weekly_total: int
    daily_average_per_member: int
