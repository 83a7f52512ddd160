from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import Entity
from ..core.exceptions import NotFoundError, ValidationError
from ..leagues.repository import LeagueRepository
from ..teams.repository import TeamRepository
from .model import Match
from .repository import MatchRepository

logger = logging.getLogger(__name__)


class MatchService:
    def __init__(self, matches: MatchRepository, leagues: LeagueRepository, teams: TeamRepository):
        self._matches = matches
        self._leagues = leagues
        self._teams = teams

    def create(self, payload: dict) -> Match:
        host, guest = payload["host"], payload["guest"]
        if host == guest:
            raise ValidationError("Invalid create-match request", ["host and guest must be different teams"])

        if not self._leagues.exists(payload["leagueId"]):
            raise NotFoundError(Entity.LEAGUE.value, payload["leagueId"])
        for team_id in (host, guest):
            if not self._teams.exists(team_id):
                raise NotFoundError(Entity.TEAM.value, team_id)

        match = self._matches.create(
            played=payload["played"],
            venue=payload["venue"],
            score=payload["score"],
            outcome=payload["outcome"],
            league_id=payload["leagueId"],
            host=host,
            guest=guest,
        )
        logger.info("created match %s", match.match_id)
        return match

    def get(self, match_id: int) -> Match:
        match = self._matches.get_by_id(match_id)
        if not match:
            raise NotFoundError(Entity.MATCH.value, match_id)
        return match

    def list_page(self, *, offset: int, limit: int) -> Sequence[Match]:
        return self._matches.list_page(offset=offset, limit=limit)

    def teams(self, match_id: int) -> dict:
        match = self.get(match_id)
        return {"host": match.host, "guest": match.guest}

    def update(self, match_id: int, changes: dict) -> None:
        if not self._matches.update(match_id, **changes):
            raise NotFoundError(Entity.MATCH.value, match_id)
        logger.info("updated match %s: %s", match_id, sorted(changes))

    def delete(self, match_id: int) -> None:
        if not self._matches.delete(match_id):
            raise NotFoundError(Entity.MATCH.value, match_id)
        logger.info("deleted match %s", match_id)
