from __future__ import annotations

from typing import Optional, Sequence

from ..database import models as orm
from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Stat
from .repository import StatRepository


class SQLAlchemyStatRepository(SQLAlchemyRepository[Stat], StatRepository):
    model = orm.Stat

    def _to_domain(self, row: orm.Stat) -> Stat:
        return Stat(
            stat_id=int(row.id),
            goals=int(row.goals),
            assists=int(row.assists),
            saves=int(row.saves),
            yellow=int(row.yellow),
            red=int(row.red),
            minutes=int(row.minutes),
            match_id=int(row.match_id),
            player_id=int(row.player_id),
        )

    def list_by_player(self, player_id: int) -> Sequence[Stat]:
        return self._all(self._select().where(orm.Stat.player_id == player_id))

    def get_by_player_and_match(self, player_id: int, match_id: int) -> Optional[Stat]:
        stmt = self._select().where(orm.Stat.player_id == player_id, orm.Stat.match_id == match_id)
        row = self._db.session.scalars(stmt).first()
        return self._to_domain(row) if row is not None else None
