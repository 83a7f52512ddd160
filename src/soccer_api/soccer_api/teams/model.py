from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date


@dataclass(frozen=True)
class Team:
    """Thực thể miền (domain): Đội bóng."""

    team_id: int
    name: str
    founded: Optional[date] = None
    venue: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.team_id,
            "name": self.name,
            "founded": format_iso_date(self.founded),
            "venue": self.venue,
            "city": self.city,
            "country": self.country,
        }
