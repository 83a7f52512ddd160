from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError, ConflictError
from ..users.model import User
from ..users.repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)

# Checked against when the username is unknown, so both refusals cost one hash.
_DUMMY_HASH = generate_password_hash("soccer-api-unknown-user")


class AuthService:
    """Use case: sign up and sign in (token issuance)."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def sign_up(self, username: str, password: str) -> User:
        if self._users.get_by_username(username):
            raise ConflictError(f"Username {username} is already taken")

        user = self._users.create_user(username=username, password_hash=generate_password_hash(password))
        logger.info("registered user %s (id=%s)", user.username, user.user_id)
        return user

    def sign_in(self, username: str, password: str) -> str:
        user = self._users.get_by_username(username)
        if not user:
            check_password_hash(_DUMMY_HASH, password)
            logger.warning("sign-in refused: unknown username %r", username)
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("sign-in refused: wrong password for %r", username)
            raise AuthenticationError("Invalid username or password")

        return self._tokens.issue(user_id=user.user_id, username=user.username)
