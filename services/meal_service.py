from typing import List, Optional, Union
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.enums import MealType, price_for
from domain.models import MealEntry
from domain.schemas.meal_schemas import (
    DailyTotalsResponse,
    WeeklyTotalResponse,
    DashboardSummaryResponse,
)
from domain.mappers import TeamMemberMapper
from repositories import TeamMemberRepository, MealEntryRepository
from services import aggregation_service
from services.aggregation_service import parse_iso_date
from app.exceptions import ServiceValidationError, NotFoundError

logger = logging.getLogger("mealtracker.meals")


class MealService:
    """Business logic for recording meals and reading daily/weekly totals"""

    @staticmethod
    def record_meal(
        db: Session,
        team_member_id: Optional[Union[UUID, str]],
        date: Optional[str],
        meal_type: Optional[Union[MealType, str]] = None,
        cost: Optional[int] = None,
    ) -> MealEntry:
        """
        Set a member's meal for a date (the only write path for meal data).

        A missing type means the caller is clearing the day and is stored as
        NONE. The stored cost always comes from the price table; a supplied
        cost must agree with it.

        Raises:
            ServiceValidationError: missing member id/date, bad date, bad type,
                or a cost that does not match the type
            NotFoundError: team member does not exist
        """
        if not team_member_id:
            raise ServiceValidationError(
                "Team member ID and date are required",
                details={"missing": ["team_member_id"]},
            )
        if isinstance(team_member_id, str):
            try:
                team_member_id = UUID(team_member_id)
            except ValueError:
                raise ServiceValidationError(
                    "team_member_id must be a UUID",
                    details={"team_member_id": team_member_id},
                )
        iso_date = parse_iso_date(date).isoformat()

        try:
            meal_type = MealType(meal_type) if meal_type is not None else MealType.NONE
        except ValueError:
            raise ServiceValidationError(
                f"Unknown meal type: {meal_type}",
                details={"allowed": [t.value for t in MealType]},
            )

        expected_cost = price_for(meal_type)
        if cost is not None and cost != expected_cost:
            raise ServiceValidationError(
                f"Cost {cost} does not match the price of {meal_type.value} ({expected_cost})",
                details={"type": meal_type.value, "expected_cost": expected_cost},
            )

        if not TeamMemberRepository(db).exists(team_member_id):
            logger.warning(f"meal_record_failed team_member_id={team_member_id} reason=not_found")
            raise NotFoundError(
                f"Team member {team_member_id} not found",
                details={"team_member_id": str(team_member_id)},
            )

        entry = MealEntryRepository(db).upsert(
            team_member_id, iso_date, meal_type, expected_cost
        )
        logger.info(
            f"meal_recorded meal_id={entry.id} team_member_id={team_member_id} "
            f"date={iso_date} type={meal_type.value} cost={expected_cost}"
        )
        return entry

    @staticmethod
    def get_meal(db: Session, team_member_id: UUID, date: Optional[str]) -> MealEntry:
        """Return the stored entry for (member, date) or raise NotFoundError."""
        iso_date = parse_iso_date(date).isoformat()
        entry = MealEntryRepository(db).get_by_member_and_date(team_member_id, iso_date)
        if entry is None:
            raise NotFoundError(
                f"No meal recorded for team member {team_member_id} on {iso_date}",
                details={"team_member_id": str(team_member_id), "date": iso_date},
            )
        return entry

    @staticmethod
    def get_meals_for_date(db: Session, date: Optional[str]) -> List[MealEntry]:
        iso_date = parse_iso_date(date).isoformat()
        return MealEntryRepository(db).get_for_date(iso_date)

    @staticmethod
    def get_daily_totals(db: Session, date: Optional[str]) -> DailyTotalsResponse:
        """Totals for one date across every member, plus that day's entries."""
        iso_date = parse_iso_date(date).isoformat()
        members = TeamMemberRepository(db).get_all()
        totals = aggregation_service.daily_totals(members, iso_date)
        meals = MealEntryRepository(db).get_for_date(iso_date)
        return DailyTotalsResponse(
            date=iso_date,
            meals=TeamMemberMapper.to_meals_with_member(meals),
            **totals.model_dump(),
        )

    @staticmethod
    def get_weekly_total(db: Session, date: Optional[str]) -> WeeklyTotalResponse:
        reference = parse_iso_date(date)
        start, end = aggregation_service.week_window(reference)
        members = TeamMemberRepository(db).get_all()
        return WeeklyTotalResponse(
            reference_date=reference.isoformat(),
            week_start=start.isoformat(),
            week_end=end.isoformat(),
            total_cost=aggregation_service.weekly_total(members, reference),
        )

    @staticmethod
    def get_dashboard_summary(db: Session, date: Optional[str]) -> DashboardSummaryResponse:
        iso_date = parse_iso_date(date).isoformat()
        members = TeamMemberRepository(db).get_all()
        totals = aggregation_service.daily_totals(members, iso_date)
        return DashboardSummaryResponse(
            date=iso_date,
            member_count=len(members),
            total_cost=totals.total_cost,
            chicken_count=totals.chicken_count,
            veg_count=totals.veg_count,
            total_meals=totals.chicken_count + totals.veg_count,
            weekly_total=aggregation_service.weekly_total(members, iso_date),
            daily_average_per_member=aggregation_service.daily_average_per_member(
                members, iso_date
            ),
        )
