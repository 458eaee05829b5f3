from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import Id, MAX_INT

NameStr = Annotated[str, Field(min_length=1, max_length=255)]
OrderIndex = Annotated[int, Field(ge=0, le=MAX_INT)]

class ExerciseCreate(BaseModel):
    routine_id: Id
    name: NameStr
    order_index: OrderIndex

class ExerciseRead(BaseModel):
    id: int
    routine_id: int
    name: str
    order_index: int
    created_at: datetime

    model_config = {"from_attributes": True}
