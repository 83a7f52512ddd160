from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, Sequence, TypeVar

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

T = TypeVar("T")


@contextmanager
def session_scope(database: SQLAlchemy) -> Iterator[Session]:
    session = database.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


class SQLAlchemyRepository(Generic[T]):
    """Generic persistence for one table.

    Subclasses set `model` (the ORM class) and implement `_to_domain()`; callers
    only ever see frozen domain dataclasses, never ORM rows.
    """

    model: Any = None

    def __init__(self, database: SQLAlchemy):
        self._db = database

    def _to_domain(self, row) -> T:
        raise NotImplementedError

    def _select(self):
        return select(self.model).order_by(self.model.id)

    def _all(self, stmt) -> list[T]:
        return [self._to_domain(r) for r in self._db.session.scalars(stmt).all()]

    def create(self, **attrs: Any) -> T:
        with session_scope(self._db) as session:
            row = self.model(**attrs)
            session.add(row)
            session.flush()
            return self._to_domain(row)

    def get_by_id(self, entity_id: int) -> Optional[T]:
        row = self._db.session.get(self.model, entity_id)
        return self._to_domain(row) if row is not None else None

    def exists(self, entity_id: int) -> bool:
        return self._db.session.get(self.model, entity_id) is not None

    def list_page(self, *, offset: int, limit: int) -> Sequence[T]:
        return self._all(self._select().offset(offset).limit(limit))

    def update(self, entity_id: int, **attrs: Any) -> int:
        with session_scope(self._db) as session:
            result = session.execute(update(self.model).where(self.model.id == entity_id).values(**attrs))
            return int(result.rowcount or 0)

    def delete(self, entity_id: int) -> int:
        with session_scope(self._db) as session:
            result = session.execute(delete(self.model).where(self.model.id == entity_id))
            return int(result.rowcount or 0)
