from liftlog.models.user import User
from liftlog.models.routine import WorkoutRoutine
from liftlog.models.exercise import Exercise
from liftlog.models.session import WorkoutSession
from liftlog.models.workout_set import WorkoutSet

__all__ = ["User", "WorkoutRoutine", "Exercise", "WorkoutSession", "WorkoutSet"]
