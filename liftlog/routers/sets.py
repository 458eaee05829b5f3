from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.schemas.workout_set import SetCreate, SetRead
from liftlog.repositories.set_repo import SetRepository

router = APIRouter(prefix="/rpc", tags=["sets"])

@router.post("/createWorkoutSet", response_model=SetRead, status_code=status.HTTP_201_CREATED)
def create_workout_set(payload: SetCreate, db: Session = Depends(get_db)):
    return SetRepository(db).create(
        payload.session_id,
        exercise_name=payload.exercise_name,
        set_number=payload.set_number,
        reps=payload.reps,
        weight=payload.weight,
    )
