from __future__ import annotations

from enum import Enum


class FieldKind(str, Enum):
    """Kiểu dữ liệu được phép cho một trường trong request body."""

    STRING = "string"
    INTEGER = "integer"
    ISO_DATE = "iso_date"


class Entity(str, Enum):
    """Tên thực thể dùng trong thông báo lỗi (not found, id sai định dạng)."""

    LEAGUE = "League"
    TEAM = "Team"
    PLAYER = "Player"
    MATCH = "Match"
    STAT = "Stat"
    USER = "User"
