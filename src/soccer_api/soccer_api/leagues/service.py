from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import Entity
from ..core.exceptions import NotFoundError
from .model import League
from .repository import LeagueRepository

logger = logging.getLogger(__name__)


class LeagueService:
    def __init__(self, leagues: LeagueRepository):
        self._leagues = leagues

    def create(self, payload: dict) -> League:
        league = self._leagues.create(name=payload["name"], country=payload["country"], season=payload["season"])
        logger.info("created league %s", league.league_id)
        return league

    def get(self, league_id: int) -> League:
        league = self._leagues.get_by_id(league_id)
        if not league:
            raise NotFoundError(Entity.LEAGUE.value, league_id)
        return league

    def list_page(self, *, offset: int, limit: int) -> Sequence[League]:
        return self._leagues.list_page(offset=offset, limit=limit)

    def update(self, league_id: int, changes: dict) -> None:
        if not self._leagues.update(league_id, **changes):
            raise NotFoundError(Entity.LEAGUE.value, league_id)
        logger.info("updated league %s: %s", league_id, sorted(changes))

    def delete(self, league_id: int) -> None:
        if not self._leagues.delete(league_id):
            raise NotFoundError(Entity.LEAGUE.value, league_id)
        logger.info("deleted league %s", league_id)
