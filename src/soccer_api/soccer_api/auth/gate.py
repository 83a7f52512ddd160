from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, request

from ..core.exceptions import AccessDeniedError
from .tokens import Credential, TokenService


class AuthGate:
    """Protect write routes: no valid, unexpired token, no handler call.

    Absent, malformed, tampered and expired tokens are all refused the same way.
    """

    def __init__(self, tokens: TokenService):
        self._tokens = tokens

    @staticmethod
    def _extract_token(header_value: Optional[str]) -> str:
        value = (header_value or "").strip()
        scheme, _, rest = value.partition(" ")
        if rest and scheme.lower() == "bearer":
            value = rest.strip()
        if not value or " " in value:
            raise AccessDeniedError("missing token")
        return value

    def authenticate(self, header_value: Optional[str]) -> Credential:
        return self._tokens.verify(self._extract_token(header_value))

    def require_token(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.credential = self.authenticate(request.headers.get("Authorization"))
            return view(*args, **kwargs)

        return wrapper
