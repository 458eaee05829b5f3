from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.schemas.user import UserCreate, UserLogin, UserRead
from liftlog.repositories.user_repo import UserRepository

router = APIRouter(prefix="/rpc", tags=["users"])

@router.post("/createUser", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserRepository(db).create(email=payload.email, password=payload.password, name=payload.name)

@router.post("/loginUser", response_model=UserRead)
def login_user(payload: UserLogin, db: Session = Depends(get_db)):
    return UserRepository(db).login(payload.email, payload.password)
