OSIMHEN = {
    "firstname": "Victor",
    "lastname": "Osimhen",
    "birthdate": "1998-12-29",
    "country": "Nigeria",
    "position": "Forward",
    "numero": 9,
}


def test_create_and_get_player(client, auth_headers):
    created = client.post("/players", json=OSIMHEN, headers=auth_headers).get_json()

    res = client.get(f"/players/{created['id']}")

    assert res.status_code == 200
    assert res.get_json() == {"id": created["id"], **OSIMHEN, "teamId": None}


def test_create_player_unknown_team(client, auth_headers):
    res = client.post("/players", json={**OSIMHEN, "teamId": 404}, headers=auth_headers)

    assert res.status_code == 404
    assert client.get("/players").get_json() == []


def test_create_player_wrong_types(client, auth_headers):
    res = client.post("/players", json={**OSIMHEN, "numero": "9"}, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["rawErrors"] == ["numero must be an integer number"]


def test_update_player_position(client, auth_headers):
    created = client.post("/players", json=OSIMHEN, headers=auth_headers).get_json()

    res = client.put(f"/players/{created['id']}", json={"position": "Striker"}, headers=auth_headers)

    assert res.status_code == 200
    assert client.get(f"/players/{created['id']}").get_json()["position"] == "Striker"


def test_player_stats_empty(client, auth_headers):
    created = client.post("/players", json=OSIMHEN, headers=auth_headers).get_json()

    res = client.get(f"/players/{created['id']}/stats")

    assert res.status_code == 200
    assert res.get_json() == []


def test_player_match_stats_bad_match_id(client, auth_headers):
    created = client.post("/players", json=OSIMHEN, headers=auth_headers).get_json()

    res = client.get(f"/players/{created['id']}/match/first/stats")

    assert res.status_code == 400
    assert res.get_json()["message"] == "Match id should be a number"


def test_player_id_must_be_numeric(client):
    assert client.get("/players/1.5").status_code == 400
    assert client.get("/players/-1").status_code == 400


def test_create_player_numero_out_of_range(client, auth_headers):
    res = client.post("/players", json={**OSIMHEN, "numero": 10**20}, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["rawErrors"] == ["numero must not be greater than 2147483647"]


def test_delete_player(client, auth_headers):
    created = client.post("/players", json=OSIMHEN, headers=auth_headers).get_json()

    res = client.delete(f"/players/{created['id']}", headers=auth_headers)

    assert res.status_code == 200
    assert res.get_json() == {"message": f"Player {created['id']} deleted"}
    assert client.get(f"/players/{created['id']}").status_code == 404
    assert client.delete(f"/players/{created['id']}", headers=auth_headers).status_code == 404


def test_player_writes_require_token(client, auth_headers):
    created = client.post("/players", json=OSIMHEN, headers=auth_headers).get_json()

    assert client.put(f"/players/{created['id']}", json={"numero": 10}).status_code == 401
    assert client.delete(f"/players/{created['id']}").status_code == 401
    assert client.get(f"/players/{created['id']}").get_json()["numero"] == 9
