#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the team_member and meal_entry tables for the configured database.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect

from app.config import settings
from domain.models import Database

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("mealtracker.init_db")


def main() -> int:
    database = Database(settings.database_url, echo=settings.db_echo)
    try:
        database.init_database()
        tables = inspect(database.engine).get_table_names()
        logger.info(f"Created {len(tables)} tables: {', '.join(tables)}")
        return 0
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        return 1
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(main())
