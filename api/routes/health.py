"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger("mealtracker.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "service": "MealTracker"}


@router.get("/health-check/db")
def database_health_check(db: Session = Depends(get_db)):
    """Run a trivial query against the configured database."""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "reachable"}
    except Exception as e:
        logger.exception("Database health check failed")
        return {"status": "error", "database": "unreachable", "error": str(e)}
