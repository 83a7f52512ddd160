from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import Entity
from ..core.exceptions import NotFoundError
from ..matches.repository import MatchRepository
from ..players.repository import PlayerRepository
from .model import Stat
from .repository import StatRepository
from .requests import COUNTERS

logger = logging.getLogger(__name__)


class StatService:
    def __init__(self, stats: StatRepository, matches: MatchRepository, players: PlayerRepository):
        self._stats = stats
        self._matches = matches
        self._players = players

    def create(self, payload: dict) -> Stat:
        if not self._matches.exists(payload["matchId"]):
            raise NotFoundError(Entity.MATCH.value, payload["matchId"])
        if not self._players.exists(payload["playerId"]):
            raise NotFoundError(Entity.PLAYER.value, payload["playerId"])

        stat = self._stats.create(
            **{name: payload[name] for name in COUNTERS},
            match_id=payload["matchId"],
            player_id=payload["playerId"],
        )
        logger.info("created stat %s (player=%s, match=%s)", stat.stat_id, stat.player_id, stat.match_id)
        return stat

    def get(self, stat_id: int) -> Stat:
        stat = self._stats.get_by_id(stat_id)
        if not stat:
            raise NotFoundError(Entity.STAT.value, stat_id)
        return stat

    def list_page(self, *, offset: int, limit: int) -> Sequence[Stat]:
        return self._stats.list_page(offset=offset, limit=limit)

    def update(self, stat_id: int, changes: dict) -> None:
        if not self._stats.update(stat_id, **changes):
            raise NotFoundError(Entity.STAT.value, stat_id)
        logger.info("updated stat %s: %s", stat_id, sorted(changes))

    def delete(self, stat_id: int) -> None:
        if not self._stats.delete(stat_id):
            raise NotFoundError(Entity.STAT.value, stat_id)
        logger.info("deleted stat %s", stat_id)
