# liftlog/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select

from liftlog.errors import InvalidCredentials
from liftlog.models import User
from liftlog.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):

    # READS
    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def login(self, email: str, password: str) -> User:
        """
        Look the user up by email.

        The password is not checked: credentials are stored as given and
        verification is left to whatever fronts this service.
        """
        user = self.get_by_email(email)
        if user is None:
            raise InvalidCredentials()
        return user

    # WRITES
    def create(self, *, email: str, password: str, name: str) -> User:
        user = User(email=email, password_hash=password, name=name)
        return self.insert(user, what="user")
