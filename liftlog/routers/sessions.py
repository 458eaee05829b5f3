from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.schemas.common import MAX_INT
from liftlog.schemas.session import SessionCreate, SessionRead, SessionWithSetsRead
from liftlog.repositories.session_repo import SessionRepository

router = APIRouter(prefix="/rpc", tags=["sessions"])

@router.post("/createWorkoutSession", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def create_workout_session(payload: SessionCreate, db: Session = Depends(get_db)):
    return SessionRepository(db).create(payload.user_id, routine_id=payload.routine_id, name=payload.name)

@router.get("/getWorkoutSessionDetails", response_model=SessionWithSetsRead)
def get_workout_session_details(
    session_id: int = Query(..., alias="sessionId", ge=1, le=MAX_INT),
    db: Session = Depends(get_db),
):
    return SessionWithSetsRead.from_composite(SessionRepository(db).details(session_id))

@router.get("/getUserWorkoutHistory", response_model=list[SessionWithSetsRead])
def get_user_workout_history(
    user_id: int = Query(..., alias="userId", ge=1, le=MAX_INT),
    db: Session = Depends(get_db),
):
    history = SessionRepository(db).history_for_user(user_id)
    return [SessionWithSetsRead.from_composite(h) for h in history]
