from __future__ import annotations

from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):

    def create(self, routine_id: int, *, name: str, order_index: int) -> Exercise:
        ex = Exercise(routine_id=routine_id, name=name, order_index=order_index)
        return self.insert(ex, what="exercise")
