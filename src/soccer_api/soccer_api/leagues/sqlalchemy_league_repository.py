from __future__ import annotations

from ..database import models as orm
from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import League
from .repository import LeagueRepository


class SQLAlchemyLeagueRepository(SQLAlchemyRepository[League], LeagueRepository):
    model = orm.League

    def _to_domain(self, row: orm.League) -> League:
        return League(league_id=int(row.id), name=row.name, country=row.country, season=row.season)
