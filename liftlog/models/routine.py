from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Text, DateTime, func
from liftlog.db import Base

class WorkoutRoutine(Base):
    __tablename__ = "workout_routines"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="routines")
    exercises = relationship("Exercise", back_populates="routine", cascade="all, delete-orphan", passive_deletes=True)
    sessions = relationship("WorkoutSession", back_populates="routine", cascade="all, delete-orphan", passive_deletes=True)
