from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy import select

from liftlog.errors import NotFound
from liftlog.models import WorkoutSession, WorkoutSet
from liftlog.repositories.base import BaseRepository
from liftlog.repositories.set_repo import SetRepository

@dataclass(slots=True)
class SessionWithSets:
    session: WorkoutSession
    sets: list[WorkoutSet] = field(default_factory=list)

class SessionRepository(BaseRepository[WorkoutSession]):

    def get(self, session_id: int) -> Optional[WorkoutSession]:
        return self.db.get(WorkoutSession, session_id)

    def list_by_user(self, user_id: int) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, *, routine_id: int, name: str) -> WorkoutSession:
        sess = WorkoutSession(user_id=user_id, routine_id=routine_id, name=name)
        return self.insert(sess, what="workout session")

    def history_for_user(self, user_id: int) -> list[SessionWithSets]:
        """Sessions in the order the store returns them, each with its sets."""
        sessions = self.list_by_user(user_id)
        if not sessions:
            return []

        by_session: dict[int, list[WorkoutSet]] = {s.id: [] for s in sessions}
        for st in SetRepository(self.db).list_by_sessions(list(by_session)):
            by_session[st.session_id].append(st)
        return [SessionWithSets(s, by_session[s.id]) for s in sessions]

    def details(self, session_id: int) -> SessionWithSets:
        sess = self.get(session_id)
        if sess is None:
            raise NotFound(f"workout session {session_id} not found")
        return SessionWithSets(sess, SetRepository(self.db).list_by_session(session_id))
