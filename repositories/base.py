"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, List, Type
from uuid import UUID
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common lookups.
    All repositories should inherit from this class.

    Repositories never commit on their own unless the method name says so;
    the service layer owns transaction boundaries.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        """
        Get entity by primary key.

        Args:
            entity_id: Entity UUID

        Returns:
            Entity or None if not found
        """
        return self.db.get(self.model, entity_id)

    def get_all(self) -> List[ModelType]:
        """Get all entities (no pagination)"""
        return self.db.query(self.model).all()

    def exists(self, entity_id: UUID) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None
