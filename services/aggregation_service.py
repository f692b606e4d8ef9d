"""
Meal aggregation - pure functions over members already fetched from the store.

A member is anything exposing ``meals``; a meal is anything exposing
``date`` (ISO ``YYYY-MM-DD`` string), ``type`` and ``cost``. A missing entry
for a date and an entry of type NONE contribute the same thing: zero cost and
no count.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence, Tuple, Union

from app.exceptions import ServiceValidationError
from domain.enums import MealType
from domain.schemas.meal_schemas import DailyTotals, MemberStats

DateLike = Union[str, date]


def parse_iso_date(value: Optional[DateLike], field: str = "date") -> date:
    """Parse a YYYY-MM-DD string (or pass a date through), raising InvalidInput."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not str(value).strip():
        raise ServiceValidationError(f"{field} is required", details={"field": field})
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ServiceValidationError(
            f"{field} must be a calendar date in YYYY-MM-DD format",
            details={"field": field, "value": value},
        )


def to_iso(value: DateLike) -> str:
    return parse_iso_date(value).isoformat()


def _meal_on(member, day: str):
    """Return the member's meal for an ISO date, or None."""
    for meal in member.meals:
        if meal.date == day:
            return meal
    return None


def _type_of(meal) -> Optional[MealType]:
    if meal is None or meal.type is None:
        return None
    return MealType(meal.type)


def _cost_of(meal) -> int:
    if meal is None:
        return 0
    return meal.cost or 0


def daily_totals(members: Iterable, day: DateLike) -> DailyTotals:
    """Sum cost and count chicken/veg meals across all members for one date."""
    iso_day = to_iso(day)
    totals = DailyTotals()
    for member in members:
        meal = _meal_on(member, iso_day)
        totals.total_cost += _cost_of(meal)
        meal_type = _type_of(meal)
        if meal_type == MealType.CHICKEN:
            totals.chicken_count += 1
        elif meal_type == MealType.VEG:
            totals.veg_count += 1
    return totals


def week_window(reference_date: DateLike) -> Tuple[date, date]:
    """Return (Sunday on or before reference_date, following Saturday)."""
    ref = parse_iso_date(reference_date)
    # date.weekday() is Monday=0; shift so Sunday=0
    sunday_index = (ref.weekday() + 1) % 7
    start = ref - timedelta(days=sunday_index)
    return start, start + timedelta(days=6)


def week_dates(reference_date: DateLike) -> list[str]:
    start, _ = week_window(reference_date)
    return [(start + timedelta(days=offset)).isoformat() for offset in range(7)]


def weekly_total(members: Sequence, reference_date: DateLike) -> int:
    """Total cost across all members for the Sunday-Saturday week of reference_date."""
    days = week_dates(reference_date)
    return sum(_cost_of(_meal_on(member, day)) for member in members for day in days)


def member_stats(member) -> MemberStats:
    """Lifetime totals for one member; NONE entries are not counted as meals."""
    total_spent = sum(_cost_of(meal) for meal in member.meals)
    chicken_meals = sum(1 for meal in member.meals if _type_of(meal) == MealType.CHICKEN)
    veg_meals = sum(1 for meal in member.meals if _type_of(meal) == MealType.VEG)
    total_meals = chicken_meals + veg_meals
    average = round(total_spent / total_meals) if total_meals > 0 else 0
    return MemberStats(
        total_spent=total_spent,
        chicken_meals=chicken_meals,
        veg_meals=veg_meals,
        total_meals=total_meals,
        average_cost_per_meal=average,
    )


def daily_average_per_member(members: Sequence, day: DateLike) -> int:
    """Daily total divided evenly over the whole team, 0 for an empty team."""
    if not members:
        return 0
    return round(daily_totals(members, day).total_cost / len(members))
