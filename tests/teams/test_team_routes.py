import pytest

NAPOLI = {
    "name": "SSC Napoli",
    "venue": "Stadio Diego Armando Maradona",
    "founded": "1926-08-01",
    "city": "Naples",
    "country": "Italy",
}


@pytest.fixture
def team(client, auth_headers):
    res = client.post("/teams", json=NAPOLI, headers=auth_headers)
    assert res.status_code == 200
    return res.get_json()


def test_create_team(team):
    assert isinstance(team["id"], int)
    assert team["founded"] == "1926-08-01"
    assert team["city"] == "Naples"


def test_create_team_bad_date(client, auth_headers):
    res = client.post("/teams", json={**NAPOLI, "founded": "August 1926"}, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["rawErrors"] == ["founded must be a valid ISO 8601 date string"]


def test_create_team_requires_token(client):
    assert client.post("/teams", json=NAPOLI).status_code == 401


def test_update_team(client, auth_headers, team):
    res = client.put(f"/teams/{team['id']}", json={"venue": "San Paolo"}, headers=auth_headers)

    assert res.status_code == 200
    assert client.get(f"/teams/{team['id']}").get_json()["venue"] == "San Paolo"


def test_team_players(client, auth_headers, team):
    player = {"firstname": "Victor", "lastname": "Osimhen", "numero": 9, "birthdate": "1998-12-29"}
    client.post("/players", json={**player, "teamId": team["id"]}, headers=auth_headers)
    client.post("/players", json={**player, "firstname": "Free", "lastname": "Agent"}, headers=auth_headers)

    res = client.get(f"/teams/{team['id']}/players")

    assert res.status_code == 200
    assert [p["lastname"] for p in res.get_json()] == ["Osimhen"]


def test_team_players_unknown_team(client):
    assert client.get("/teams/77/players").status_code == 404


def test_team_id_must_be_numeric(client):
    res = client.get("/teams/napoli")

    assert res.status_code == 400
    assert res.get_json()["message"] == "Team id should be a number"


def test_delete_team(client, auth_headers, team):
    assert client.delete(f"/teams/{team['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/teams/{team['id']}").status_code == 404


def test_delete_team_with_players_conflicts(client, auth_headers, team):
    player = {"firstname": "Victor", "lastname": "Osimhen", "numero": 9, "birthdate": "1998-12-29"}
    client.post("/players", json={**player, "teamId": team["id"]}, headers=auth_headers)

    res = client.delete(f"/teams/{team['id']}", headers=auth_headers)

    assert res.status_code == 409
    assert client.get(f"/teams/{team['id']}").status_code == 200
