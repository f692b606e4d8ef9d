"""Meal recording and totals routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging
from typing import Optional
from uuid import UUID

from api.dependencies import get_db
from domain.schemas.team_member_schemas import MealEntryResponse
from domain.schemas.meal_schemas import (
    MealUpsertRequest,
    DailyTotalsResponse,
    WeeklyTotalResponse,
    DashboardSummaryResponse,
)
from services import MealService
from domain.mappers import TeamMemberMapper
from app.exceptions import ServiceValidationError

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("mealtracker.api.meals")


@router.post("", response_model=MealEntryResponse)
def upsert_meal(payload: MealUpsertRequest, db: Session = Depends(get_db)):
    """
    Create or overwrite a member's meal for a date.

    There is a single entry per (team member, date); posting again replaces
    its type and cost. A null type clears the day (stored as NONE).
    """
    entry = MealService.record_meal(
        db, payload.team_member_id, payload.date, payload.type, payload.cost
    )
    return TeamMemberMapper.to_meal_response(entry)


@router.get("", response_model=DailyTotalsResponse)
def get_daily_totals(
    date: Optional[str] = Query(None, description="Date in YYYY-MM-DD format"),
    db: Session = Depends(get_db),
):
    """Daily totals across the team and the entries recorded for that date."""
    return MealService.get_daily_totals(db, date)


@router.get("/entry", response_model=MealEntryResponse)
def get_meal_entry(
    team_member_id: Optional[UUID] = Query(None),
    date: Optional[str] = Query(None, description="Date in YYYY-MM-DD format"),
    db: Session = Depends(get_db),
):
    if team_member_id is None:
        raise ServiceValidationError(
            "Team member ID and date are required",
            details={"missing": ["team_member_id"]},
        )
    entry = MealService.get_meal(db, team_member_id, date)
    return TeamMemberMapper.to_meal_response(entry)


@router.get("/weekly", response_model=WeeklyTotalResponse)
def get_weekly_total(
    date: Optional[str] = Query(None, description="Any date inside the week"),
    db: Session = Depends(get_db),
):
    """Total spend for the Sunday-Saturday week containing the date."""
    return MealService.get_weekly_total(db, date)


@router.get("/summary", response_model=DashboardSummaryResponse)
def get_dashboard_summary(
    date: Optional[str] = Query(None, description="Date in YYYY-MM-DD format"),
    db: Session = Depends(get_db),
):
    """Daily counts, weekly total and per-member daily average in one call."""
    return MealService.get_dashboard_summary(db, date)
