#!/usr/bin/env python3
"""
Seed the database with a demo team and their January 2024 meals.

Every meal goes through MealService.record_meal so costs come from the
price table, exactly as they would through the API.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from domain.enums import MealType
from domain.models import Database
from services import TeamService, MealService

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger("mealtracker.seed")

C, V, N = MealType.CHICKEN, MealType.VEG, MealType.NONE

DEMO_TEAM = [
    {
        "employee_id": "EMP001",
        "name": "Ahmed Khan",
        "meals": [
            ("2024-01-10", C), ("2024-01-11", V), ("2024-01-12", C),
            ("2024-01-15", C), ("2024-01-16", V), ("2024-01-17", N),
            ("2024-01-18", C), ("2024-01-19", V),
        ],
    },
    {
        "employee_id": "EMP002",
        "name": "Sarah Ali",
        "meals": [
            ("2024-01-10", V), ("2024-01-11", V), ("2024-01-12", C),
            ("2024-01-15", V), ("2024-01-16", C), ("2024-01-17", C),
            ("2024-01-18", V),
        ],
    },
    {
        "employee_id": "EMP003",
        "name": "Hassan Ahmed",
        "meals": [
            ("2024-01-09", C), ("2024-01-10", C), ("2024-01-11", N),
            ("2024-01-12", V), ("2024-01-15", C), ("2024-01-16", N),
            ("2024-01-17", V), ("2024-01-18", C), ("2024-01-19", C),
        ],
    },
]


def seed(database: Database, reset: bool = False) -> int:
    """Create the demo team; returns the number of meal entries written."""
    if reset:
        database.drop_all()
    database.init_database()

    written = 0
    with database.session() as db:
        for member_data in DEMO_TEAM:
            member = TeamService.create_team_member(
                db, member_data["employee_id"], member_data["name"]
            )
            logger.info(f"Created team member: {member.name} ({member.employee_id})")

            for day, meal_type in member_data["meals"]:
                MealService.record_meal(db, member.id, day, meal_type)
                written += 1
            logger.info(f"Added {len(member_data['meals'])} meals for {member.name}")
    return written


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed MealTracker with demo data")
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy URL (defaults to DATABASE_URL / settings)",
    )
    parser.add_argument(
        "--reset", action="store_true", help="Drop and recreate tables before seeding"
    )
    args = parser.parse_args(argv)

    database = Database(args.database_url)
    try:
        count = seed(database, reset=args.reset)
    except Exception as e:
        logger.error(f"Error seeding database: {e}")
        return 1
    finally:
        database.dispose()

    logger.info(f"Database seeded successfully ({count} meal entries)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
