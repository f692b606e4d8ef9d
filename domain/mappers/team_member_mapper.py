"""
Team member domain mappers.
Handles transformation between ORM models and DTOs for members and their meals.
"""

from typing import Iterable, List
from domain.models import TeamMember, MealEntry
from domain.schemas.team_member_schemas import (
    TeamMemberResponse,
    TeamMemberSummary,
    MealEntryResponse,
    MemberStatsResponse,
)
from domain.schemas.meal_schemas import MealWithMemberResponse, MemberStats


class TeamMemberMapper:
    """Mapper for team member and meal entry transformations."""

    @staticmethod
    def to_response(member: TeamMember) -> TeamMemberResponse:
        """
        Convert TeamMember ORM model to TeamMemberResponse DTO.

        Args:
            member: TeamMember ORM instance with meals loaded

        Returns:
            TeamMemberResponse DTO with meals in the order they were loaded
            (date descending)
        """
        return TeamMemberResponse(
            id=member.id,
            employee_id=member.employee_id,
            name=member.name,
            created_at=member.created_at,
            updated_at=member.updated_at,
            meals=[MealEntryResponse.model_validate(m) for m in member.meals],
        )

    @staticmethod
    def to_meal_response(meal: MealEntry) -> MealEntryResponse:
        return MealEntryResponse.model_validate(meal)

    @staticmethod
    def to_meals_with_member(meals: Iterable[MealEntry]) -> List[MealWithMemberResponse]:
        return [
            MealWithMemberResponse(
                id=m.id,
                team_member_id=m.team_member_id,
                date=m.date,
                type=m.type,
                cost=m.cost,
                created_at=m.created_at,
                updated_at=m.updated_at,
                team_member=TeamMemberSummary.model_validate(m.team_member),
            )
            for m in meals
        ]

    @staticmethod
    def to_stats_response(member: TeamMember, stats: MemberStats) -> MemberStatsResponse:
        return MemberStatsResponse(team_member_id=member.id, **stats.model_dump())
