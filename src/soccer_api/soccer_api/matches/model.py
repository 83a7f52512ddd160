from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import format_iso_date


@dataclass(frozen=True)
class Match:
    """Thực thể miền (domain): Trận đấu.

    `host`/`guest` là id của hai đội.
    """

    match_id: int
    played: date
    venue: str
    score: str
    outcome: int
    league_id: int
    host: int
    guest: int

    def to_dict(self) -> dict:
        return {
            "id": self.match_id,
            "played": format_iso_date(self.played),
            "venue": self.venue,
            "score": self.score,
            "outcome": self.outcome,
            "leagueId": self.league_id,
            "host": self.host,
            "guest": self.guest,
        }
