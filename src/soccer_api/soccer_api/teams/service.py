from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import Entity
from ..core.exceptions import NotFoundError
from ..players.model import Player
from ..players.repository import PlayerRepository
from .model import Team
from .repository import TeamRepository

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, teams: TeamRepository, players: PlayerRepository):
        self._teams = teams
        self._players = players

    def create(self, payload: dict) -> Team:
        team = self._teams.create(
            name=payload["name"],
            venue=payload["venue"],
            founded=payload["founded"],
            city=payload["city"],
            country=payload["country"],
        )
        logger.info("created team %s", team.team_id)
        return team

    def get(self, team_id: int) -> Team:
        team = self._teams.get_by_id(team_id)
        if not team:
            raise NotFoundError(Entity.TEAM.value, team_id)
        return team

    def list_page(self, *, offset: int, limit: int) -> Sequence[Team]:
        return self._teams.list_page(offset=offset, limit=limit)

    def players(self, team_id: int) -> Sequence[Player]:
        if not self._teams.exists(team_id):
            raise NotFoundError(Entity.TEAM.value, team_id)
        return self._players.list_by_team(team_id)

    def update(self, team_id: int, changes: dict) -> None:
        if not self._teams.update(team_id, **changes):
            raise NotFoundError(Entity.TEAM.value, team_id)
        logger.info("updated team %s: %s", team_id, sorted(changes))

    def delete(self, team_id: int) -> None:
        if not self._teams.delete(team_id):
            raise NotFoundError(Entity.TEAM.value, team_id)
        logger.info("deleted team %s", team_id)
