from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.schemas.common import MAX_INT
from liftlog.schemas.routine import RoutineCreate, RoutineRead, RoutineWithExercisesRead
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead
from liftlog.repositories.routine_repo import RoutineRepository
from liftlog.repositories.exercise_repo import ExerciseRepository

router = APIRouter(prefix="/rpc", tags=["routines"])

@router.post("/createWorkoutRoutine", response_model=RoutineRead, status_code=status.HTTP_201_CREATED)
def create_workout_routine(payload: RoutineCreate, db: Session = Depends(get_db)):
    return RoutineRepository(db).create(payload.user_id, name=payload.name, description=payload.description)

@router.get("/getUserWorkoutRoutines", response_model=list[RoutineWithExercisesRead])
def get_user_workout_routines(
    user_id: int = Query(..., alias="userId", ge=1, le=MAX_INT),
    db: Session = Depends(get_db),
):
    routines = RoutineRepository(db).list_with_exercises(user_id)
    return [RoutineWithExercisesRead.from_composite(r) for r in routines]

@router.post("/createExercise", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    return ExerciseRepository(db).create(payload.routine_id, name=payload.name, order_index=payload.order_index)
