"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    The session comes from the Database handle the application factory
    stored on ``app.state.database``.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from request.app.state.database.get_db_session()
