"""
Meal Entry Repository - Data access layer for meal entries
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID
from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.models import MealEntry
from domain.enums import MealType
from app.exceptions import NotFoundError

logger = logging.getLogger("mealtracker.meals")


class MealEntryRepository(BaseRepository[MealEntry]):
    """Repository for meal entry data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealEntry)

    def get_by_member_and_date(
        self, team_member_id: UUID, date: str
    ) -> Optional[MealEntry]:
        """Get the single meal entry keyed by (team_member_id, date)"""
        return (
            self.db.query(MealEntry)
            .filter(
                and_(
                    MealEntry.team_member_id == team_member_id,
                    MealEntry.date == date,
                )
            )
            .first()
        )

    def get_for_date(self, date: str) -> List[MealEntry]:
        """Get all meal entries for a date with their team member loaded"""
        return (
            self.db.query(MealEntry)
            .options(joinedload(MealEntry.team_member))
            .filter(MealEntry.date == date)
            .order_by(MealEntry.created_at)
            .all()
        )

    def get_between(self, start_date: str, end_date: str) -> List[MealEntry]:
        """Get meal entries with start_date <= date <= end_date (ISO strings sort by date)"""
        return (
            self.db.query(MealEntry)
            .filter(and_(MealEntry.date >= start_date, MealEntry.date <= end_date))
            .order_by(MealEntry.date)
            .all()
        )

    def get_by_member(self, team_member_id: UUID) -> List[MealEntry]:
        """Get all meal entries for a member, most recent date first"""
        return (
            self.db.query(MealEntry)
            .filter(MealEntry.team_member_id == team_member_id)
            .order_by(MealEntry.date.desc())
            .all()
        )

    def upsert(
        self, team_member_id: UUID, date: str, meal_type: MealType, cost: int
    ) -> MealEntry:
        """
        Create or overwrite the meal entry for (team_member_id, date) and commit.

        An existing entry keeps its id and created_at; type and cost are
        replaced and updated_at is refreshed. If a concurrent writer inserts
        the same key first, the unique constraint rejects our insert and the
        write is retried as an overwrite of their row. If the member was
        deleted in the meantime the foreign key rejects it and NotFoundError
        is raised.
        """
        existing = self.get_by_member_and_date(team_member_id, date)
        if existing:
            return self._overwrite(existing, meal_type, cost)

        entry = MealEntry(
            team_member_id=team_member_id, date=date, type=meal_type, cost=cost
        )
        self.db.add(entry)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost the race on uq_meal_entry_member_date, or the member is gone
            self.db.rollback()
            logger.info(
                f"meal_upsert_conflict team_member_id={team_member_id} date={date}"
            )
            existing = self.get_by_member_and_date(team_member_id, date)
            if existing is None:
                # No row holds the key, so the foreign key rejected the insert
                raise NotFoundError(
                    f"Team member {team_member_id} not found",
                    details={"team_member_id": str(team_member_id)},
                )
            return self._overwrite(existing, meal_type, cost)

        self.db.refresh(entry)
        return entry

    def _overwrite(self, entry: MealEntry, meal_type: MealType, cost: int) -> MealEntry:
        entry.type = meal_type
        entry.cost = cost
        entry.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(entry)
        return entry
