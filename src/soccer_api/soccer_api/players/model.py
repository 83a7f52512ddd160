from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date


@dataclass(frozen=True)
class Player:
    """Thực thể miền (domain): Cầu thủ."""

    player_id: int
    firstname: str
    lastname: str
    numero: int
    birthdate: Optional[date] = None
    country: Optional[str] = None
    position: Optional[str] = None
    team_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.player_id,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "birthdate": format_iso_date(self.birthdate),
            "country": self.country,
            "position": self.position,
            "numero": self.numero,
            "teamId": self.team_id,
        }
