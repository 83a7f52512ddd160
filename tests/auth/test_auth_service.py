from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import pytest

from src.soccer_api.soccer_api.auth.service import AuthService
from src.soccer_api.soccer_api.auth.tokens import TokenService
from src.soccer_api.soccer_api.core.exceptions import AuthenticationError, ConflictError
from src.soccer_api.soccer_api.users.model import User


@dataclass
class InMemoryUserRepo:
    users: Dict[int, User] = field(default_factory=dict)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(self, *, username: str, password_hash: str) -> User:
        user = User(user_id=len(self.users) + 1, username=username, password_hash=password_hash)
        self.users[user.user_id] = user
        return user


@pytest.fixture
def repo():
    return InMemoryUserRepo()


@pytest.fixture
def tokens(fixed_now):
    return TokenService("s3cret", clock=lambda: fixed_now)


@pytest.fixture
def svc(repo, tokens):
    return AuthService(repo, tokens)


def test_sign_up_stores_hash_not_password(svc, repo):
    user = svc.sign_up("tifoso", "ForzaRagazz1")

    stored = repo.get_by_id(user.user_id)
    assert stored.password_hash != "ForzaRagazz1"
    assert "ForzaRagazz1" not in stored.password_hash


def test_sign_up_duplicate_username(svc):
    svc.sign_up("tifoso", "ForzaRagazz1")

    with pytest.raises(ConflictError):
        svc.sign_up("tifoso", "another-pass")


def test_sign_in_returns_verifiable_token(svc, tokens):
    user = svc.sign_up("tifoso", "ForzaRagazz1")

    credential = tokens.verify(svc.sign_in("tifoso", "ForzaRagazz1"))

    assert credential.user_id == user.user_id
    assert credential.username == "tifoso"


def test_sign_in_wrong_password(svc):
    svc.sign_up("tifoso", "ForzaRagazz1")

    with pytest.raises(AuthenticationError):
        svc.sign_in("tifoso", "wrong-pass")


def test_sign_in_unknown_user(svc):
    with pytest.raises(AuthenticationError):
        svc.sign_in("nobody", "ForzaRagazz1")


def test_sign_in_with_unparseable_hash(svc, repo):
    repo.create_user(username="legacy", password_hash="CHANGE_ME")

    with pytest.raises(AuthenticationError):
        svc.sign_in("legacy", "whatever")


def test_unknown_user_still_checks_a_hash(svc, monkeypatch):
    from src.soccer_api.soccer_api.auth import service as auth_service

    checked = []
    monkeypatch.setattr(auth_service, "check_password_hash", lambda h, p: checked.append(p) or False)

    with pytest.raises(AuthenticationError):
        svc.sign_in("nobody", "ForzaRagazz1")

    assert checked == ["ForzaRagazz1"]
