"""
Tests for TeamService and MealService business rules.

Covers:
- create/update validation (InvalidInput) and duplicate employee IDs (DuplicateKey)
- cascade delete of a member's meals
- record_meal: price derivation, NONE handling, unknown members
- daily, weekly and dashboard totals read through the store
"""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session  # noqa: F401
from services import TeamService, MealService
from repositories import TeamMemberRepository
from domain.models import MealEntry
from domain.enums import MealType
from app.exceptions import ServiceValidationError, NotFoundError, ConflictError


@pytest.fixture
def team(db_session: Session):
    """Ahmed (EMP001) and Sarah (EMP002)"""
    ahmed = TeamService.create_team_member(db_session, "EMP001", "Ahmed Khan")
    sarah = TeamService.create_team_member(db_session, "EMP002", "Sarah Ali")
    return ahmed, sarah


# =============================================================================
# TEAM MEMBER TESTS
# =============================================================================


def test_create_team_member_trims_fields(db_session: Session):
    member = TeamService.create_team_member(db_session, "  EMP010 ", " Zara Noor  ")
    assert member.employee_id == "EMP010"
    assert member.name == "Zara Noor"


@pytest.mark.parametrize(
    "employee_id, name",
    [(None, "Ahmed"), ("", "Ahmed"), ("EMP001", None), ("EMP001", "   ")],
)
def test_create_team_member_requires_fields(db_session: Session, employee_id, name):
    with pytest.raises(ServiceValidationError):
        TeamService.create_team_member(db_session, employee_id, name)
    assert TeamService.list_team_members(db_session) == []


def test_create_duplicate_employee_id(db_session: Session, team):
    with pytest.raises(ConflictError) as exc_info:
        TeamService.create_team_member(db_session, "EMP001", "Another Ahmed")
    assert exc_info.value.code == "DUPLICATE_KEY"
    assert len(TeamService.list_team_members(db_session)) == 2


def test_create_employee_id_differs_only_in_case(db_session: Session, team):
    member = TeamService.create_team_member(db_session, "emp001", "Lowercase Ahmed")
    assert member.employee_id == "emp001"


def test_create_duplicate_caught_by_unique_index(db_session: Session, team, monkeypatch):
    """A racing create that passes the pre-check still fails with ConflictError."""
    monkeypatch.setattr(
        TeamMemberRepository, "employee_id_taken", lambda self, *a, **k: False
    )
    with pytest.raises(ConflictError):
        TeamService.create_team_member(db_session, "EMP001", "Racing Ahmed")

    # Session is usable and nothing was written
    assert len(TeamService.list_team_members(db_session)) == 2


def test_update_team_member(db_session: Session, team):
    ahmed, _ = team
    updated = TeamService.update_team_member(db_session, ahmed.id, "EMP101", "Ahmed K.")
    assert updated.id == ahmed.id
    assert updated.employee_id == "EMP101"
    assert updated.name == "Ahmed K."


def test_update_team_member_keeps_own_employee_id(db_session: Session, team):
    ahmed, _ = team
    updated = TeamService.update_team_member(db_session, ahmed.id, "EMP001", "Ahmed Khan Jr")
    assert updated.name == "Ahmed Khan Jr"


def test_update_team_member_conflict(db_session: Session, team):
    ahmed, _ = team
    with pytest.raises(ConflictError):
        TeamService.update_team_member(db_session, ahmed.id, "EMP002", "Ahmed Khan")
    assert TeamService.get_team_member(db_session, ahmed.id).employee_id == "EMP001"


def test_update_team_member_not_found(db_session: Session):
    with pytest.raises(NotFoundError):
        TeamService.update_team_member(db_session, uuid.uuid4(), "EMP001", "Nobody")


def test_update_team_member_requires_fields(db_session: Session, team):
    ahmed, _ = team
    with pytest.raises(ServiceValidationError):
        TeamService.update_team_member(db_session, ahmed.id, "EMP001", "")


def test_update_team_member_unchanged_values_refreshes_updated_at(db_session: Session, team):
    ahmed, _ = team
    stale = datetime(2020, 1, 1, tzinfo=timezone.utc)
    ahmed.updated_at = stale
    db_session.commit()

    updated = TeamService.update_team_member(db_session, ahmed.id, "EMP001", "Ahmed Khan")

    assert updated.updated_at.replace(tzinfo=None) > stale.replace(tzinfo=None)


def test_delete_team_member_cascades(db_session: Session, team):
    ahmed, sarah = team
    ahmed_id = ahmed.id
    MealService.record_meal(db_session, ahmed_id, "2024-01-10", MealType.CHICKEN)
    MealService.record_meal(db_session, ahmed_id, "2024-01-11", MealType.VEG)
    MealService.record_meal(db_session, sarah.id, "2024-01-10", MealType.VEG)

    removed = TeamService.delete_team_member(db_session, ahmed_id)

    assert removed == 2
    assert db_session.query(MealEntry).filter(MealEntry.team_member_id == ahmed_id).count() == 0
    with pytest.raises(NotFoundError):
        TeamService.get_team_member(db_session, ahmed_id)
    assert len(TeamService.get_team_member(db_session, sarah.id).meals) == 1


def test_delete_team_member_not_found(db_session: Session):
    with pytest.raises(NotFoundError):
        TeamService.delete_team_member(db_session, uuid.uuid4())


def test_delete_team_member_failure_leaves_member_and_meals(db_session: Session, team, monkeypatch):
    """A failure after the meals are deleted rolls the whole delete back."""
    ahmed, _ = team
    ahmed_id = ahmed.id
    MealService.record_meal(db_session, ahmed_id, "2024-01-10", MealType.CHICKEN)
    MealService.record_meal(db_session, ahmed_id, "2024-01-11", MealType.VEG)

    def failing_delete(instance):
        raise RuntimeError("disk full")

    monkeypatch.setattr(db_session, "delete", failing_delete)
    with pytest.raises(RuntimeError):
        TeamService.delete_team_member(db_session, ahmed_id)
    monkeypatch.undo()

    assert db_session.query(MealEntry).filter(MealEntry.team_member_id == ahmed_id).count() == 2
    assert len(TeamService.get_team_member(db_session, ahmed_id).meals) == 2


def test_member_stats_through_store(db_session: Session, team):
    ahmed, _ = team
    for day, meal_type in [
        ("2024-01-10", MealType.CHICKEN),
        ("2024-01-11", MealType.VEG),
        ("2024-01-12", MealType.CHICKEN),
        ("2024-01-17", MealType.NONE),
    ]:
        MealService.record_meal(db_session, ahmed.id, day, meal_type)

    _, stats = TeamService.get_member_stats(db_session, ahmed.id)

    assert stats.total_spent == 560
    assert stats.total_meals == 3
    assert stats.average_cost_per_meal == 187


# =============================================================================
# MEAL RECORDING TESTS
# =============================================================================


def test_record_meal_derives_cost(db_session: Session, team):
    ahmed, _ = team
    entry = MealService.record_meal(db_session, ahmed.id, "2024-01-10", MealType.CHICKEN)
    assert entry.cost == 220
    assert entry.type == MealType.CHICKEN
    assert entry.date == "2024-01-10"


def test_record_meal_accepts_matching_cost_and_string_ids(db_session: Session, team):
    ahmed, _ = team
    entry = MealService.record_meal(db_session, str(ahmed.id), "2024-01-10", "VEG", 120)
    assert entry.cost == 120


def test_record_meal_rejects_wrong_cost(db_session: Session, team):
    ahmed, _ = team
    with pytest.raises(ServiceValidationError):
        MealService.record_meal(db_session, ahmed.id, "2024-01-10", MealType.VEG, 220)
    assert db_session.query(MealEntry).count() == 0


def test_record_meal_null_type_clears_day(db_session: Session, team):
    ahmed, _ = team
    first = MealService.record_meal(db_session, ahmed.id, "2024-01-10", MealType.CHICKEN)
    first_id = first.id

    cleared = MealService.record_meal(db_session, ahmed.id, "2024-01-10", None)

    assert cleared.id == first_id
    assert cleared.type == MealType.NONE
    assert cleared.cost == 0


def test_record_meal_type_transitions_freely(db_session: Session, team):
    ahmed, _ = team
    for meal_type in (MealType.VEG, MealType.NONE, MealType.CHICKEN, MealType.VEG):
        entry = MealService.record_meal(db_session, ahmed.id, "2024-01-10", meal_type)
        assert entry.type == meal_type
    assert db_session.query(MealEntry).count() == 1


@pytest.mark.parametrize(
    "member_id, date",
    [(None, "2024-01-10"), ("not-a-uuid", "2024-01-10")],
)
def test_record_meal_invalid_member_id(db_session: Session, member_id, date):
    with pytest.raises(ServiceValidationError):
        MealService.record_meal(db_session, member_id, date, MealType.CHICKEN)


@pytest.mark.parametrize("date", [None, "", "2024-13-01", "yesterday"])
def test_record_meal_invalid_date(db_session: Session, team, date):
    ahmed, _ = team
    with pytest.raises(ServiceValidationError):
        MealService.record_meal(db_session, ahmed.id, date, MealType.CHICKEN)


def test_record_meal_unknown_type(db_session: Session, team):
    ahmed, _ = team
    with pytest.raises(ServiceValidationError):
        MealService.record_meal(db_session, ahmed.id, "2024-01-10", "BEEF")


def test_record_meal_unknown_member(db_session: Session):
    with pytest.raises(NotFoundError):
        MealService.record_meal(db_session, uuid.uuid4(), "2024-01-10", MealType.CHICKEN)
    assert db_session.query(MealEntry).count() == 0


def test_record_meal_member_removed_before_insert(db_session: Session, monkeypatch):
    """The member passes the existence check but is gone when the entry is written."""
    monkeypatch.setattr(TeamMemberRepository, "exists", lambda self, entity_id: True)

    with pytest.raises(NotFoundError):
        MealService.record_meal(db_session, uuid.uuid4(), "2024-01-10", MealType.CHICKEN)
    assert db_session.query(MealEntry).count() == 0


def test_get_meal(db_session: Session, team):
    ahmed, _ = team
    MealService.record_meal(db_session, ahmed.id, "2024-01-10", MealType.VEG)

    assert MealService.get_meal(db_session, ahmed.id, "2024-01-10").type == MealType.VEG
    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, ahmed.id, "2024-01-11")


# =============================================================================
# TOTALS TESTS
# =============================================================================


def test_daily_totals(db_session: Session, team):
    ahmed, sarah = team
    MealService.record_meal(db_session, ahmed.id, "2024-01-10", MealType.CHICKEN)
    MealService.record_meal(db_session, sarah.id, "2024-01-10", MealType.VEG)
    MealService.record_meal(db_session, sarah.id, "2024-01-11", MealType.CHICKEN)

    totals = MealService.get_daily_totals(db_session, "2024-01-10")

    assert totals.total_cost == 340
    assert totals.chicken_count == 1
    assert totals.veg_count == 1
    assert len(totals.meals) == 2
    assert {m.team_member.name for m in totals.meals} == {"Ahmed Khan", "Sarah Ali"}


def test_daily_totals_requires_date(db_session: Session):
    with pytest.raises(ServiceValidationError):
        MealService.get_daily_totals(db_session, None)


def test_weekly_total_and_summary(db_session: Session, team):
    ahmed, sarah = team
    MealService.record_meal(db_session, ahmed.id, "2024-01-06", MealType.CHICKEN)  # previous week
    MealService.record_meal(db_session, ahmed.id, "2024-01-07", MealType.CHICKEN)
    MealService.record_meal(db_session, ahmed.id, "2024-01-10", MealType.VEG)
    MealService.record_meal(db_session, sarah.id, "2024-01-10", MealType.VEG)
    MealService.record_meal(db_session, sarah.id, "2024-01-13", MealType.CHICKEN)

    weekly = MealService.get_weekly_total(db_session, "2024-01-10")
    assert weekly.week_start == "2024-01-07"
    assert weekly.week_end == "2024-01-13"
    assert weekly.total_cost == 220 + 120 + 120 + 220

    summary = MealService.get_dashboard_summary(db_session, "2024-01-10")
    assert summary.member_count == 2
    assert summary.total_cost == 240
    assert summary.veg_count == 2
    assert summary.total_meals == 2
    assert summary.weekly_total == 680
    assert summary.daily_average_per_member == 120
