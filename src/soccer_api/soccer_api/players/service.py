from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.enums import Entity
from ..core.exceptions import NotFoundError
from ..stats.model import Stat
from ..stats.repository import StatRepository
from ..teams.repository import TeamRepository
from .model import Player
from .repository import PlayerRepository

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(self, players: PlayerRepository, teams: TeamRepository, stats: StatRepository):
        self._players = players
        self._teams = teams
        self._stats = stats

    def _require_team(self, team_id: Optional[int]) -> None:
        if team_id is not None and not self._teams.exists(team_id):
            raise NotFoundError(Entity.TEAM.value, team_id)

    def _require_player(self, player_id: int) -> None:
        if not self._players.exists(player_id):
            raise NotFoundError(Entity.PLAYER.value, player_id)

    def create(self, payload: dict) -> Player:
        self._require_team(payload.get("teamId"))
        player = self._players.create(
            firstname=payload["firstname"],
            lastname=payload["lastname"],
            numero=payload["numero"],
            birthdate=payload["birthdate"],
            country=payload.get("country"),
            position=payload.get("position"),
            team_id=payload.get("teamId"),
        )
        logger.info("created player %s", player.player_id)
        return player

    def get(self, player_id: int) -> Player:
        player = self._players.get_by_id(player_id)
        if not player:
            raise NotFoundError(Entity.PLAYER.value, player_id)
        return player

    def list_page(self, *, offset: int, limit: int) -> Sequence[Player]:
        return self._players.list_page(offset=offset, limit=limit)

    def update(self, player_id: int, changes: dict) -> None:
        changes = dict(changes)
        if "teamId" in changes:
            changes["team_id"] = changes.pop("teamId")
            self._require_team(changes["team_id"])

        if not self._players.update(player_id, **changes):
            raise NotFoundError(Entity.PLAYER.value, player_id)
        logger.info("updated player %s: %s", player_id, sorted(changes))

    def delete(self, player_id: int) -> None:
        if not self._players.delete(player_id):
            raise NotFoundError(Entity.PLAYER.value, player_id)
        logger.info("deleted player %s", player_id)

    def stats(self, player_id: int) -> Sequence[Stat]:
        self._require_player(player_id)
        return self._stats.list_by_player(player_id)

    def match_stats(self, player_id: int, match_id: int) -> Stat:
        self._require_player(player_id)
        stat = self._stats.get_by_player_and_match(player_id, match_id)
        if not stat:
            raise NotFoundError(
                Entity.STAT.value,
                match_id,
                message=f"No stats for player {player_id} in match {match_id}",
            )
        return stat
