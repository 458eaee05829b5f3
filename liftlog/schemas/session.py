from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import Id

from liftlog.schemas.workout_set import SetRead

NameStr = Annotated[str, Field(min_length=1, max_length=255)]

class SessionCreate(BaseModel):
    user_id: Id
    routine_id: Id
    name: NameStr

class SessionRead(BaseModel):
    id: int
    user_id: int
    routine_id: int
    name: str
    completed_at: datetime
    created_at: datetime

    model_config = {"from_attributes": True}

class SessionWithSetsRead(SessionRead):
    sets: list[SetRead]

    @classmethod
    def from_composite(cls, composite) -> "SessionWithSetsRead":
        base = SessionRead.model_validate(composite.session)
        return cls(
            **base.model_dump(),
            sets=[SetRead.model_validate(s) for s in composite.sets],
        )
