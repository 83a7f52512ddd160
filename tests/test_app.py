def test_home_returns_welcome_message(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.get_json() == {"message": "Hello To Soccer API!"}


def test_healthcheck_reports_uptime(client):
    res = client.get("/healthcheck")

    assert res.status_code == 200
    body = res.get_json()
    assert body["status"] == "ok"
    assert body["uptime"] >= 0


def test_unknown_route_uses_error_envelope(client):
    res = client.get("/referees")

    assert res.status_code == 404
    body = res.get_json()
    assert body["success"] is False
    assert body["rawErrors"] == []


def test_url_prefix_mounts_routes(monkeypatch):
    import config.testing

    from src.soccer_api.soccer_api.main import create_app

    monkeypatch.setattr(config.testing, "URL_PREFIX", "/backend")
    app = create_app("config.testing")
    client = app.test_client()

    assert client.get("/backend/").status_code == 200
    assert client.get("/").status_code == 404
