from __future__ import annotations

from ..database import models as orm
from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Team
from .repository import TeamRepository


class SQLAlchemyTeamRepository(SQLAlchemyRepository[Team], TeamRepository):
    model = orm.Team

    def _to_domain(self, row: orm.Team) -> Team:
        return Team(
            team_id=int(row.id),
            name=row.name,
            founded=row.founded,
            venue=row.venue,
            city=row.city,
            country=row.country,
        )
