from __future__ import annotations

import importlib
import logging
import time
from typing import Optional

from dotenv import load_dotenv
from flask import Blueprint, Flask, request

from config import get_settings_module

from .auth.controller import register as register_auth
from .container import Container, build_container
from .core.errors import register_error_handlers
from .core.logging import configure_logging
from .database.bootstrap import init_schema, list_tables, seed_demo_data
from .database.extension import db
from .home.controller import register as register_home
from .leagues.controller import register as register_leagues
from .matches.controller import register as register_matches
from .players.controller import register as register_players
from .stats.controller import register as register_stats
from .teams.controller import register as register_teams

CONTAINER_KEY = "soccer_api.container"

logger = logging.getLogger(__name__)


def get_container(app: Flask) -> Container:
    return app.extensions[CONTAINER_KEY]


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.from_object(settings)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("settings=%s db=%s", settings_module, db_label(app.config["SQLALCHEMY_DATABASE_URI"]))

    db.init_app(app)
    if app.config.get("AUTO_INIT_DB", False):
        init_schema(app)
        logger.info("schema ready (tables=%d)", len(list_tables(app)))

    container = build_container(
        database=db,
        token_secret=app.config["TOKEN_SECRET"],
        token_ttl_seconds=int(app.config["TOKEN_TTL_SECONDS"]),
    )
    app.extensions[CONTAINER_KEY] = container

    bp = Blueprint("api", __name__)
    register_home(bp, started_at=time.monotonic())
    register_auth(bp, container)
    register_leagues(bp, container)
    register_teams(bp, container)
    register_players(bp, container)
    register_matches(bp, container)
    register_stats(bp, container)
    app.register_blueprint(bp, url_prefix=app.config.get("URL_PREFIX") or None)

    register_error_handlers(app)

    @app.after_request
    def log_request(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    if app.config.get("AUTO_SEED_DB", False):
        seed_demo_data(
            app,
            container,
            username=app.config["DEMO_USERNAME"],
            password=app.config["DEMO_PASSWORD"],
        )

    return app


def db_label(uri: str) -> str:
    """Database URI without credentials, for logs."""
    scheme, sep, rest = uri.partition("://")
    if "@" in rest:
        rest = rest.split("@", 1)[1]
    return f"{scheme}{sep}{rest}"
