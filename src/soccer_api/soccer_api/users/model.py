from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Thực thể miền (domain): User.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    `password_hash` không bao giờ được trả về client.
    """

    user_id: int
    username: str
    password_hash: str

    def to_dict(self) -> dict:
        return {"id": self.user_id, "username": self.username}
