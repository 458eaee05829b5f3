"""Client side of the procedure API.

``LiftlogClient`` wraps an ``httpx.Client`` (a FastAPI ``TestClient`` works
too) and decodes responses into the same Pydantic shapes the server sends,
so timestamps come back as ``datetime`` objects and weights as floats.

``RoutineBuilder`` and ``WorkoutLogger`` hold the transient state of the
"create routine" and "log a workout" flows and only talk to the server when
submitted.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import httpx

from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.routine import RoutineRead, RoutineWithExercisesRead
from liftlog.schemas.session import SessionRead, SessionWithSetsRead
from liftlog.schemas.user import UserRead
from liftlog.schemas.workout_set import SetRead

log = logging.getLogger(__name__)


class LiftlogClient:
    """Typed calls against the ``/rpc`` procedures."""

    def __init__(self, http: httpx.Client, prefix: str = "/rpc") -> None:
        self.http = http
        self.prefix = prefix.rstrip("/")

    def _query(self, name: str, **params) -> object:
        resp = self.http.get(f"{self.prefix}/{name}", params=params)
        resp.raise_for_status()
        return resp.json()

    def _mutate(self, name: str, payload: dict) -> object:
        resp = self.http.post(f"{self.prefix}/{name}", json=payload)
        resp.raise_for_status()
        return resp.json()

    # users
    def create_user(self, email: str, password: str, name: str) -> UserRead:
        data = self._mutate("createUser", {"email": email, "password": password, "name": name})
        return UserRead.model_validate(data)

    def login(self, email: str, password: str) -> UserRead:
        data = self._mutate("loginUser", {"email": email, "password": password})
        return UserRead.model_validate(data)

    # routines
    def create_routine(self, user_id: int, name: str, description: Optional[str] = None) -> RoutineRead:
        data = self._mutate(
            "createWorkoutRoutine",
            {"user_id": user_id, "name": name, "description": description},
        )
        return RoutineRead.model_validate(data)

    def create_exercise(self, routine_id: int, name: str, order_index: int) -> ExerciseRead:
        data = self._mutate(
            "createExercise",
            {"routine_id": routine_id, "name": name, "order_index": order_index},
        )
        return ExerciseRead.model_validate(data)

    def routines(self, user_id: int) -> list[RoutineWithExercisesRead]:
        data = self._query("getUserWorkoutRoutines", userId=user_id)
        return [RoutineWithExercisesRead.model_validate(r) for r in data]

    # sessions
    def create_session(self, user_id: int, routine_id: int, name: str) -> SessionRead:
        data = self._mutate(
            "createWorkoutSession",
            {"user_id": user_id, "routine_id": routine_id, "name": name},
        )
        return SessionRead.model_validate(data)

    def create_set(self, session_id: int, exercise_name: str, set_number: int, reps: int, weight: float) -> SetRead:
        data = self._mutate(
            "createWorkoutSet",
            {
                "session_id": session_id,
                "exercise_name": exercise_name,
                "set_number": set_number,
                "reps": reps,
                "weight": weight,
            },
        )
        return SetRead.model_validate(data)

    def session_details(self, session_id: int) -> SessionWithSetsRead:
        data = self._query("getWorkoutSessionDetails", sessionId=session_id)
        return SessionWithSetsRead.model_validate(data)

    def history(self, user_id: int) -> list[SessionWithSetsRead]:
        data = self._query("getUserWorkoutHistory", userId=user_id)
        return [SessionWithSetsRead.model_validate(s) for s in data]

    def load_dashboard(self, user_id: int) -> tuple[list[RoutineWithExercisesRead], list[SessionWithSetsRead]]:
        return self.routines(user_id), self.history(user_id)


class RoutineBuilder:
    """Form state for a new routine: a name, an optional description and exercise names."""

    def __init__(self, user_id: int, name: str = "", description: Optional[str] = None) -> None:
        self.user_id = user_id
        self.name = name
        self.description = description
        self.exercises: list[str] = []

    def add_exercise(self, name: str) -> bool:
        name = name.strip()
        if not name or name in self.exercises:
            return False
        self.exercises.append(name)
        return True

    def remove_exercise(self, name: str) -> None:
        self.exercises = [e for e in self.exercises if e != name]

    def submit(self, client: LiftlogClient) -> RoutineWithExercisesRead:
        """
        Create the routine, then one exercise per name in list order.

        These are separate calls. If an exercise call fails the routine
        is already stored and keeps whatever exercises made it in.
        """
        if not self.exercises:
            raise ValueError("a routine needs at least one exercise")
        routine = client.create_routine(self.user_id, self.name, self.description)
        created = [
            client.create_exercise(routine.id, name, index)
            for index, name in enumerate(self.exercises)
        ]
        log.info("created routine %s with %d exercises", routine.id, len(created))
        return RoutineWithExercisesRead(**routine.model_dump(), exercises=created)


class WorkoutLogger:
    """Sets logged against a routine before the session is saved."""

    def __init__(self, routine: RoutineWithExercisesRead, name: Optional[str] = None) -> None:
        self.routine = routine
        self.name = name or f"{routine.name} - {date.today().isoformat()}"
        self.current_exercise = routine.exercises[0].name if routine.exercises else ""
        self.sets: list[dict] = []

    def select_exercise(self, name: str) -> None:
        self.current_exercise = name

    def add_set(self, reps: int, weight: float) -> Optional[dict]:
        if not self.current_exercise or reps <= 0 or weight < 0:
            return None
        entry = {
            "exercise_name": self.current_exercise,
            "set_number": len(self.sets_for(self.current_exercise)) + 1,
            "reps": reps,
            "weight": weight,
        }
        self.sets.append(entry)
        return entry

    def sets_for(self, exercise_name: str) -> list[dict]:
        return [s for s in self.sets if s["exercise_name"] == exercise_name]

    def finish(self, client: LiftlogClient, user_id: int) -> SessionWithSetsRead:
        if not self.sets:
            raise ValueError("log at least one set before finishing")
        session = client.create_session(user_id, self.routine.id, self.name)
        saved = [client.create_set(session.id, **s) for s in self.sets]
        self.sets = []
        return SessionWithSetsRead(**session.model_dump(), sets=saved)
