from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from ..database import models as orm
from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import User
from .repository import UserRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    model = orm.User

    def _to_domain(self, row: orm.User) -> User:
        return User(user_id=int(row.id), username=row.username, password_hash=row.password)

    def get_by_username(self, username: str) -> Optional[User]:
        row = self._db.session.scalars(select(orm.User).where(orm.User.username == username)).first()
        return self._to_domain(row) if row is not None else None

    def create_user(self, *, username: str, password_hash: str) -> User:
        return self.create(username=username, password=password_hash)
