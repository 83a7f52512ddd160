from __future__ import annotations

from dataclasses import dataclass

from flask_sqlalchemy import SQLAlchemy

from .auth.gate import AuthGate
from .auth.service import AuthService
from .auth.tokens import TokenService
from .core.constants import DEFAULT_TOKEN_TTL_SECONDS
from .leagues.service import LeagueService
from .leagues.sqlalchemy_league_repository import SQLAlchemyLeagueRepository
from .matches.service import MatchService
from .matches.sqlalchemy_match_repository import SQLAlchemyMatchRepository
from .players.service import PlayerService
from .players.sqlalchemy_player_repository import SQLAlchemyPlayerRepository
from .stats.service import StatService
from .stats.sqlalchemy_stat_repository import SQLAlchemyStatRepository
from .teams.service import TeamService
from .teams.sqlalchemy_team_repository import SQLAlchemyTeamRepository
from .users.sqlalchemy_user_repository import SQLAlchemyUserRepository


@dataclass(frozen=True)
class Container:
    users_repo: SQLAlchemyUserRepository
    leagues_repo: SQLAlchemyLeagueRepository
    teams_repo: SQLAlchemyTeamRepository
    players_repo: SQLAlchemyPlayerRepository
    matches_repo: SQLAlchemyMatchRepository
    stats_repo: SQLAlchemyStatRepository

    tokens: TokenService
    auth_gate: AuthGate

    auth_service: AuthService
    league_service: LeagueService
    team_service: TeamService
    player_service: PlayerService
    match_service: MatchService
    stat_service: StatService


def build_container(
    *,
    database: SQLAlchemy,
    token_secret: str,
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
) -> Container:
    users_repo = SQLAlchemyUserRepository(database)
    leagues_repo = SQLAlchemyLeagueRepository(database)
    teams_repo = SQLAlchemyTeamRepository(database)
    players_repo = SQLAlchemyPlayerRepository(database)
    matches_repo = SQLAlchemyMatchRepository(database)
    stats_repo = SQLAlchemyStatRepository(database)

    tokens = TokenService(token_secret, ttl_seconds=token_ttl_seconds)

    return Container(
        users_repo=users_repo,
        leagues_repo=leagues_repo,
        teams_repo=teams_repo,
        players_repo=players_repo,
        matches_repo=matches_repo,
        stats_repo=stats_repo,
        tokens=tokens,
        auth_gate=AuthGate(tokens),
        auth_service=AuthService(users_repo, tokens),
        league_service=LeagueService(leagues_repo),
        team_service=TeamService(teams_repo, players_repo),
        player_service=PlayerService(players_repo, teams_repo, stats_repo),
        match_service=MatchService(matches_repo, leagues_repo, teams_repo),
        stat_service=StatService(stats_repo, matches_repo, players_repo),
    )
