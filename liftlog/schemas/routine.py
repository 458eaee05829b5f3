from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import Id

from liftlog.schemas.exercise import ExerciseRead

NameStr = Annotated[str, Field(min_length=1, max_length=255)]

class RoutineCreate(BaseModel):
    user_id: Id
    name: NameStr
    description: str | None = None

class RoutineRead(BaseModel):
    id: int
    user_id: int
    name: str
    description: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

class RoutineWithExercisesRead(RoutineRead):
    exercises: list[ExerciseRead]

    @classmethod
    def from_composite(cls, composite) -> "RoutineWithExercisesRead":
        base = RoutineRead.model_validate(composite.routine)
        return cls(
            **base.model_dump(),
            exercises=[ExerciseRead.model_validate(e) for e in composite.exercises],
        )
