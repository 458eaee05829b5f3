from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import Id, MAX_INT

ExerciseStr = Annotated[str, Field(min_length=1, max_length=255)]
PosInt = Annotated[int, Field(ge=1, le=MAX_INT)]
# NUMERIC(8, 2) caps the stored value
Weight = Annotated[float, Field(ge=0, le=999_999.99)]

class SetCreate(BaseModel):
    session_id: Id
    exercise_name: ExerciseStr
    set_number: PosInt
    reps: PosInt
    weight: Weight

class SetRead(BaseModel):
    id: int
    session_id: int
    exercise_name: str
    set_number: int
    reps: int
    weight: float
    created_at: datetime

    model_config = {"from_attributes": True}
