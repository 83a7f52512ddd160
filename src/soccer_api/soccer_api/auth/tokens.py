from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from itsdangerous import BadData, URLSafeSerializer

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_TOKEN_TTL_SECONDS, TOKEN_SALT
from ..core.exceptions import AccessDeniedError


@dataclass(frozen=True)
class Credential:
    """Identity proven by a verified token."""

    user_id: int
    username: str
    expires_at: datetime


class TokenService:
    """Issue and verify signed, time-limited tokens.

    The payload is `{sub, username, exp}` signed with `secret`; verification is a
    pure cryptographic check plus an expiry comparison (no I/O).
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("token secret must not be empty")
        self._serializer = URLSafeSerializer(secret, salt=TOKEN_SALT)
        self._ttl = timedelta(seconds=int(ttl_seconds))
        self._clock = clock or now_utc

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, *, user_id: int, username: str) -> str:
        expires_at = self._clock() + self._ttl
        return self._serializer.dumps(
            {"sub": int(user_id), "username": username, "exp": math.ceil(expires_at.timestamp())}
        )

    def verify(self, token: str) -> Credential:
        try:
            data = self._serializer.loads(token)
        except BadData:
            raise AccessDeniedError("invalid token")

        if not isinstance(data, dict):
            raise AccessDeniedError("invalid token")
        sub, username, exp = data.get("sub"), data.get("username"), data.get("exp")
        if not isinstance(sub, int) or not isinstance(username, str) or not isinstance(exp, int):
            raise AccessDeniedError("invalid token")

        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
        if self._clock() >= expires_at:
            raise AccessDeniedError("token expired")

        return Credential(user_id=sub, username=username, expires_at=expires_at)
