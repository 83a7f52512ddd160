from __future__ import annotations

from typing import Sequence

from ..database import models as orm
from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Player
from .repository import PlayerRepository


class SQLAlchemyPlayerRepository(SQLAlchemyRepository[Player], PlayerRepository):
    model = orm.Player

    def _to_domain(self, row: orm.Player) -> Player:
        return Player(
            player_id=int(row.id),
            firstname=row.firstname,
            lastname=row.lastname,
            numero=int(row.numero),
            birthdate=row.birthdate,
            country=row.country,
            position=row.position,
            team_id=row.team_id,
        )

    def list_by_team(self, team_id: int) -> Sequence[Player]:
        return self._all(self._select().where(orm.Player.team_id == team_id))
