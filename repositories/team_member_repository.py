"""
Team Member Repository - Data access layer for team members
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import TeamMember, MealEntry


class TeamMemberRepository(BaseRepository[TeamMember]):
    """Repository for team member data access"""

    def __init__(self, db: Session):
        super().__init__(db, TeamMember)

    def get_by_id(self, member_id: UUID) -> Optional[TeamMember]:
        """Get team member by ID with meals loaded (date descending)"""
        return (
            self.db.query(TeamMember)
            .options(selectinload(TeamMember.meals))
            .filter(TeamMember.id == member_id)
            .first()
        )

    def get_all(self) -> List[TeamMember]:
        """Get every team member with meals loaded, oldest member first"""
        return (
            self.db.query(TeamMember)
            .options(selectinload(TeamMember.meals))
            .order_by(TeamMember.created_at, TeamMember.employee_id)
            .all()
        )

    def get_by_employee_id(self, employee_id: str) -> Optional[TeamMember]:
        """Get team member by employee ID (case-sensitive exact match)"""
        return (
            self.db.query(TeamMember)
            .filter(TeamMember.employee_id == employee_id)
            .first()
        )

    def employee_id_taken(
        self, employee_id: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        """Check whether another member already uses employee_id"""
        query = self.db.query(TeamMember.id).filter(
            TeamMember.employee_id == employee_id
        )
        if exclude_id is not None:
            query = query.filter(TeamMember.id != exclude_id)
        return query.first() is not None

    def add(self, employee_id: str, name: str) -> TeamMember:
        """Stage a new member and flush so the unique index is checked"""
        member = TeamMember(employee_id=employee_id, name=name)
        self.db.add(member)
        self.db.flush()
        return member

    def delete_with_meals(self, member: TeamMember) -> int:
        """
        Delete a member's meals, then the member itself.

        Both deletes are staged in the caller's transaction. Returns the
        number of meal entries removed.
        """
        count = (
            self.db.query(MealEntry)
            .filter(MealEntry.team_member_id == member.id)
            .delete()
        )
        self.db.expire(member, ["meals"])
        self.db.delete(member)
        self.db.flush()
        return count
