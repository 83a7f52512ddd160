from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Stat:
    """Thực thể miền (domain): Thống kê của một cầu thủ trong một trận."""

    stat_id: int
    goals: int
    assists: int
    saves: int
    yellow: int
    red: int
    minutes: int
    match_id: int
    player_id: int

    def to_dict(self) -> dict:
        return {
            "id": self.stat_id,
            "goals": self.goals,
            "assists": self.assists,
            "saves": self.saves,
            "yellow": self.yellow,
            "red": self.red,
            "minutes": self.minutes,
            "matchId": self.match_id,
            "playerId": self.player_id,
        }
