"""
Generic SQLAlchemy repository shared by the entity repositories.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from db.base import Base
from db.repositories.errors import EntityNotFoundError

ModelT = TypeVar("ModelT", bound=Base)


class EntityRepository(Generic[ModelT]):
    """
    Session-bound repository for one mapped entity type.

    ``save`` has upsert semantics: an entity whose primary key already exists
    is merged into the stored row instead of being inserted twice.
    """

    model: ClassVar[type[Base]]

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, entity: ModelT) -> ModelT:
        merged = self._session.merge(entity)
        self._session.flush()
        return merged

    def get(self, identity: Any) -> ModelT | None:
        return self._session.get(self.model, identity)

    def require(self, identity: Any) -> ModelT:
        entity = self.get(identity)
        if entity is None:
            raise EntityNotFoundError(f"{self.model.__name__} not found: {identity}")
        return entity

    def list_all(self, *, limit: int = 100) -> list[ModelT]:
        stmt = select(self.model).limit(limit)
        return list(self._session.scalars(stmt).all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return int(self._session.execute(stmt).scalar_one())
