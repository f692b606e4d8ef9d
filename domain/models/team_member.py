"""
Team member and meal entry database models.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Text,
    String,
    Integer,
    DateTime,
    ForeignKey,
    Uuid,
    Enum as SQLEnum,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base
from domain.enums import MealType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TeamMember(Base):
    """Team member who orders office meals"""

    __tablename__ = "team_member"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    employee_id = Column(Text, unique=True, nullable=False)
    name = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    # Relationships
    meals = relationship(
        "MealEntry",
        back_populates="team_member",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: MealEntry.date.desc(),
    )

    def __repr__(self) -> str:
        return f"<TeamMember {self.employee_id} {self.name!r}>"


class MealEntry(Base):
    """Meal ordered by one team member on one calendar date"""

    __tablename__ = "meal_entry"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    team_member_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("team_member.id", ondelete="CASCADE"),
        nullable=False,
    )
    date = Column(String(10), nullable=False)  # ISO YYYY-MM-DD
    type = Column(SQLEnum(MealType), nullable=False, default=MealType.NONE)
    cost = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    team_member = relationship("TeamMember", back_populates="meals")

    __table_args__ = (
        UniqueConstraint("team_member_id", "date", name="uq_meal_entry_member_date"),
        CheckConstraint("cost >= 0", name="ck_meal_entry_cost_nonneg"),
    )

    def __repr__(self) -> str:
        return f"<MealEntry {self.team_member_id} {self.date} {self.type}>"
