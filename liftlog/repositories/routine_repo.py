from __future__ import annotations
from dataclasses import dataclass, field

from sqlalchemy import select

from liftlog.models import Exercise, WorkoutRoutine
from liftlog.repositories.base import BaseRepository

@dataclass(slots=True)
class RoutineWithExercises:
    routine: WorkoutRoutine
    exercises: list[Exercise] = field(default_factory=list)

class RoutineRepository(BaseRepository[WorkoutRoutine]):

    def get(self, routine_id: int) -> WorkoutRoutine | None:
        return self.db.get(WorkoutRoutine, routine_id)

    def create(self, user_id: int, *, name: str, description: str | None = None) -> WorkoutRoutine:
        routine = WorkoutRoutine(user_id=user_id, name=name, description=description or None)
        return self.insert(routine, what="workout routine")

    def list_with_exercises(self, user_id: int) -> list[RoutineWithExercises]:
        """
        Every routine the user owns with its exercises, newest routine first.

        Exercises come back ascending by order_index; equal indexes keep
        insertion order. A routine without exercises gets an empty list.
        """
        stmt = (
            select(WorkoutRoutine, Exercise)
            .outerjoin(Exercise, Exercise.routine_id == WorkoutRoutine.id)
            .where(WorkoutRoutine.user_id == user_id)
            .order_by(WorkoutRoutine.id.asc(), Exercise.id.asc())
        )
        grouped: dict[int, RoutineWithExercises] = {}
        for routine, exercise in self.db.execute(stmt).all():
            entry = grouped.setdefault(routine.id, RoutineWithExercises(routine))
            if exercise is not None:
                entry.exercises.append(exercise)

        result = list(grouped.values())
        for entry in result:
            # list.sort is stable, so ties stay in id (insertion) order
            entry.exercises.sort(key=lambda e: e.order_index)
        result.sort(key=lambda r: (r.routine.created_at, r.routine.id), reverse=True)
        return result
