# liftlog/repositories/base.py
from __future__ import annotations
import logging
from typing import Generic, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from liftlog.errors import ConstraintViolation

T = TypeVar("T")  # SQLAlchemy model type

log = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, entity: T, *, what: str) -> T:
        """Insert one row and hand back the stored version (ids, defaults, coerced types)."""
        try:
            self.db.add(entity)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            log.warning("%s insert rejected by store: %s", what, e.orig)
            raise ConstraintViolation(f"could not create {what}: unique or foreign-key constraint failed") from e
        self.db.refresh(entity)
        return entity
