from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, DateTime, func, Integer
from liftlog.db import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    # Stored as given; hashing belongs to whatever sits in front of this service
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    routines = relationship("WorkoutRoutine", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    sessions = relationship("WorkoutSession", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
