from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.soccer_api.soccer_api.database.extension import db
from src.soccer_api.soccer_api.main import create_app, get_container


@pytest.fixture
def app():
    app = create_app("config.testing")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return get_container(app)


@pytest.fixture
def auth_headers(client):
    client.post("/auth/signup", json={"username": "tifoso", "password": "ForzaRagazz1"})
    res = client.post("/auth/signin", json={"username": "tifoso", "password": "ForzaRagazz1"})
    return {"Authorization": f"Bearer {res.get_json()['token']}"}


@pytest.fixture
def fixed_now():
    return datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)
