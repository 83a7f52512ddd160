from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict

import pytest

from src.soccer_api.soccer_api.core.exceptions import NotFoundError, ValidationError
from src.soccer_api.soccer_api.matches.model import Match
from src.soccer_api.soccer_api.matches.service import MatchService


@dataclass
class InMemoryMatchRepo:
    matches: Dict[int, Match] = field(default_factory=dict)

    def create(self, **attrs) -> Match:
        match = Match(match_id=len(self.matches) + 1, **attrs)
        self.matches[match.match_id] = match
        return match

    def get_by_id(self, entity_id: int):
        return self.matches.get(entity_id)

    def exists(self, entity_id: int) -> bool:
        return entity_id in self.matches


@dataclass
class KnownIds:
    ids: set

    def exists(self, entity_id: int) -> bool:
        return entity_id in self.ids


DERBY = {
    "played": date(2023, 5, 4),
    "venue": "Dacia Arena",
    "score": "1-1",
    "outcome": 0,
    "leagueId": 1,
    "host": 10,
    "guest": 20,
}


@pytest.fixture
def matches():
    return InMemoryMatchRepo()


@pytest.fixture
def svc(matches):
    return MatchService(matches, KnownIds({1}), KnownIds({10, 20}))


def test_create_match(svc):
    match = svc.create(DERBY)

    assert match.to_dict()["played"] == "2023-05-04"
    assert match.to_dict()["leagueId"] == 1
    assert svc.teams(match.match_id) == {"host": 10, "guest": 20}


def test_host_and_guest_must_differ(svc, matches):
    with pytest.raises(ValidationError) as exc:
        svc.create({**DERBY, "guest": 10})

    assert exc.value.violations == ["host and guest must be different teams"]
    assert matches.matches == {}


@pytest.mark.parametrize("override", [{"leagueId": 2}, {"host": 30}, {"guest": 40}])
def test_unknown_references(svc, matches, override):
    with pytest.raises(NotFoundError):
        svc.create({**DERBY, **override})

    assert matches.matches == {}


def test_teams_of_unknown_match(svc):
    with pytest.raises(NotFoundError):
        svc.teams(5)
