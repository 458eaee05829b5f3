from __future__ import annotations
from typing import Optional
from sqlalchemy import select
from liftlog.models import WorkoutSet
from liftlog.repositories.base import BaseRepository

class SetRepository(BaseRepository[WorkoutSet]):

    def get(self, set_id: int) -> Optional[WorkoutSet]:
        return self.db.get(WorkoutSet, set_id)

    def list_by_session(self, session_id: int) -> list[WorkoutSet]:
        stmt = select(WorkoutSet).where(WorkoutSet.session_id == session_id).order_by(WorkoutSet.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def list_by_sessions(self, session_ids: list[int]) -> list[WorkoutSet]:
        if not session_ids:
            return []
        stmt = select(WorkoutSet).where(WorkoutSet.session_id.in_(session_ids)).order_by(WorkoutSet.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, session_id: int, *, exercise_name: str, set_number: int, reps: int, weight: float) -> WorkoutSet:
        s = WorkoutSet(
            session_id=session_id,
            exercise_name=exercise_name,
            set_number=set_number,
            reps=reps,
            weight=weight,
        )
        return self.insert(s, what="workout set")
