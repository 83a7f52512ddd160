from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class League:
    """Thực thể miền (domain): Giải đấu."""

    league_id: int
    name: str
    country: str
    season: str

    def to_dict(self) -> dict:
        return {"id": self.league_id, "name": self.name, "country": self.country, "season": self.season}
