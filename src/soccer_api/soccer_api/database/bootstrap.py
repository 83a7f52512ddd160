from __future__ import annotations

import logging
from datetime import date

from flask import Flask
from sqlalchemy import inspect

from ..container import Container
from .extension import db

logger = logging.getLogger(__name__)


def init_schema(app: Flask) -> None:
    """Create missing tables (idempotent: existing tables are left alone)."""
    with app.app_context():
        db.create_all()


def list_tables(app: Flask) -> list[str]:
    with app.app_context():
        return sorted(inspect(db.engine).get_table_names())


def seed_demo_data(app: Flask, container: Container, *, username: str, password: str) -> None:
    """Insert a demo user, league and team unless they already exist."""
    with app.app_context():
        if not container.users_repo.get_by_username(username):
            container.auth_service.sign_up(username, password)

        if not container.leagues_repo.list_page(offset=0, limit=1):
            container.league_service.create({"name": "Serie A", "country": "Italy", "season": "2022-2023"})

        if not container.teams_repo.list_page(offset=0, limit=1):
            container.team_service.create(
                {
                    "name": "S.S.C. Napoli",
                    "venue": "Stadio Diego Armando Maradona",
                    "founded": date(1926, 8, 25),
                    "city": "Naples",
                    "country": "Italy",
                }
            )
        logger.info("demo data ready (user=%s)", username)
