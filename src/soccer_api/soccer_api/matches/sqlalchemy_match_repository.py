from __future__ import annotations

from ..database import models as orm
from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Match
from .repository import MatchRepository


class SQLAlchemyMatchRepository(SQLAlchemyRepository[Match], MatchRepository):
    model = orm.Match

    def _to_domain(self, row: orm.Match) -> Match:
        return Match(
            match_id=int(row.id),
            played=row.played,
            venue=row.venue,
            score=row.score,
            outcome=int(row.outcome),
            league_id=int(row.league_id),
            host=int(row.host),
            guest=int(row.guest),
        )
