"""
User repository.
"""

from __future__ import annotations

from sqlalchemy import select

from db.models.user import User
from db.repositories.base import EntityRepository


class UserRepository(EntityRepository[User]):
    model = User

    def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username.strip())
        return self._session.execute(stmt).scalars().first()
