from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.models import TeamMember
from domain.schemas.meal_schemas import MemberStats
from repositories import TeamMemberRepository
from services import aggregation_service
from app.exceptions import ServiceValidationError, NotFoundError, ConflictError

logger = logging.getLogger("mealtracker.team")


def _clean(employee_id: Optional[str], name: Optional[str]) -> Tuple[str, str]:
    """Trim both fields and reject empties with InvalidInput."""
    employee_id = (employee_id or "").strip()
    name = (name or "").strip()
    missing = [
        field
        for field, value in (("employee_id", employee_id), ("name", name))
        if not value
    ]
    if missing:
        raise ServiceValidationError(
            "Employee ID and name are required", details={"missing": missing}
        )
    return employee_id, name


class TeamService:
    """Business logic for team member management"""

    @staticmethod
    def list_team_members(db: Session) -> List[TeamMember]:
        """Return all members with their meals (no pagination)."""
        return TeamMemberRepository(db).get_all()

    @staticmethod
    def get_team_member(db: Session, member_id: UUID) -> TeamMember:
        member = TeamMemberRepository(db).get_by_id(member_id)
        if member is None:
            logger.warning(f"team_member_not_found member_id={member_id}")
            raise NotFoundError(
                f"Team member {member_id} not found",
                details={"team_member_id": str(member_id)},
            )
        return member

    @staticmethod
    def create_team_member(
        db: Session, employee_id: Optional[str], name: Optional[str]
    ) -> TeamMember:
        """
        Create a new team member.

        The duplicate pre-check gives a friendly error; the unique index on
        employee_id decides when two creates race, and the loser gets the
        same ConflictError after rollback.
        """
        employee_id, name = _clean(employee_id, name)
        repo = TeamMemberRepository(db)

        if repo.employee_id_taken(employee_id):
            raise ConflictError(
                "Employee ID already exists", details={"employee_id": employee_id}
            )

        try:
            member = repo.add(employee_id, name)
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(f"team_member_create_conflict employee_id={employee_id}")
            raise ConflictError(
                "Employee ID already exists", details={"employee_id": employee_id}
            )

        db.refresh(member)
        logger.info(
            f"team_member_created member_id={member.id} employee_id={employee_id}"
        )
        return member

    @staticmethod
    def update_team_member(
        db: Session,
        member_id: UUID,
        employee_id: Optional[str],
        name: Optional[str],
    ) -> TeamMember:
        """Replace a member's employee ID and name."""
        employee_id, name = _clean(employee_id, name)
        repo = TeamMemberRepository(db)

        member = TeamService.get_team_member(db, member_id)

        if repo.employee_id_taken(employee_id, exclude_id=member.id):
            raise ConflictError(
                "Employee ID already exists", details={"employee_id": employee_id}
            )

        member.employee_id = employee_id
        member.name = name
        # onupdate only fires when a column changes
        member.updated_at = datetime.now(timezone.utc)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(
                f"team_member_update_conflict member_id={member_id} employee_id={employee_id}"
            )
            raise ConflictError(
                "Employee ID already exists", details={"employee_id": employee_id}
            )

        db.refresh(member)
        logger.info(f"team_member_updated member_id={member_id}")
        return member

    @staticmethod
    def delete_team_member(db: Session, member_id: UUID) -> int:
        """
        Delete a member and all of their meal entries in one transaction.

        Returns the number of meal entries removed.
        """
        member = TeamService.get_team_member(db, member_id)
        try:
            removed = TeamMemberRepository(db).delete_with_meals(member)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception(f"team_member_delete_failed member_id={member_id}")
            raise

        logger.info(f"team_member_deleted member_id={member_id} meals_removed={removed}")
        return removed

    @staticmethod
    def get_member_stats(db: Session, member_id: UUID) -> Tuple[TeamMember, MemberStats]:
        member = TeamService.get_team_member(db, member_id)
        return member, aggregation_service.member_stats(member)
