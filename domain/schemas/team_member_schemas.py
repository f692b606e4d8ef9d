from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from domain.enums import MealType


class TeamMemberCreate(BaseModel):
    """Body for POST /team-members; emptiness is checked by the service (400)."""

    employee_id: Optional[str] = None
    name: Optional[str] = None


class TeamMemberUpdate(BaseModel):
    employee_id: Optional[str] = None
    name: Optional[str] = None


class MealEntryResponse(BaseModel):
    id: UUID
    team_member_id: UUID
    date: str
    type: MealType
    cost: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TeamMemberResponse(BaseModel):
    id: UUID
    employee_id: str
    name: str
    created_at: datetime
    updated_at: datetime
    meals: List[MealEntryResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class TeamMemberSummary(BaseModel):
    """Member reference embedded in meal listings"""

    id: UUID
    employee_id: str
    name: str

    model_config = {"from_attributes": True}


class MemberStatsResponse(BaseModel):
    """Lifetime meal statistics for one team member"""

    team_member_id: UUID
    total_spent: int
    chicken_meals: int
    veg_meals: int
    total_meals: int
    average_cost_per_meal: int
