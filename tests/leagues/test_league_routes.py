LEAGUE = {"name": "Serie A", "country": "Italy", "season": "2022-2023"}


def _create(client, headers, **overrides):
    res = client.post("/leagues", json={**LEAGUE, **overrides}, headers=headers)
    assert res.status_code == 200
    return res.get_json()


def test_create_then_read(client, auth_headers):
    created = _create(client, auth_headers)

    res = client.get(f"/leagues/{created['id']}")

    assert res.status_code == 200
    assert res.get_json() == {"id": created["id"], **LEAGUE}


def test_reads_are_public(client):
    res = client.get("/leagues")

    assert res.status_code == 200
    assert res.get_json() == []


def test_create_ignores_client_supplied_id(client, auth_headers):
    created = _create(client, auth_headers, id=999)

    assert created["id"] != 999


def test_create_missing_field(client, auth_headers):
    res = client.post("/leagues", json={"name": "Serie A", "country": "Italy"}, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["rawErrors"] == ["season should not be null or undefined"]


def test_non_numeric_id(client):
    res = client.get("/leagues/abc")

    assert res.status_code == 400
    assert res.get_json()["message"] == "League id should be a number"


def test_unknown_id(client):
    res = client.get("/leagues/424242")

    assert res.status_code == 404
    assert res.get_json()["success"] is False


def test_update_partial(client, auth_headers):
    created = _create(client, auth_headers)

    res = client.put(f"/leagues/{created['id']}", json={"season": "2023-2024"}, headers=auth_headers)

    assert res.status_code == 200
    assert res.get_json() == {"message": f"League {created['id']} updated"}
    assert client.get(f"/leagues/{created['id']}").get_json()["season"] == "2023-2024"
    assert client.get(f"/leagues/{created['id']}").get_json()["name"] == "Serie A"


def test_update_requires_some_field(client, auth_headers):
    created = _create(client, auth_headers)

    res = client.put(f"/leagues/{created['id']}", json={}, headers=auth_headers)

    assert res.status_code == 400


def test_update_unknown_id(client, auth_headers):
    res = client.put("/leagues/424242", json={"season": "2023-2024"}, headers=auth_headers)

    assert res.status_code == 404


def test_update_requires_token(client, auth_headers):
    created = _create(client, auth_headers)

    res = client.put(f"/leagues/{created['id']}", json={"season": "x"})

    assert res.status_code == 401


def test_delete(client, auth_headers):
    created = _create(client, auth_headers)

    res = client.delete(f"/leagues/{created['id']}", headers=auth_headers)

    assert res.status_code == 200
    assert res.get_json() == {"message": f"League {created['id']} deleted"}
    assert client.get(f"/leagues/{created['id']}").status_code == 404
    assert client.delete(f"/leagues/{created['id']}", headers=auth_headers).status_code == 404


def test_delete_requires_token(client):
    assert client.delete("/leagues/1").status_code == 401


def test_pagination(client, auth_headers):
    ids = [_create(client, auth_headers, name=f"League {i}")["id"] for i in range(5)]

    page = client.get("/leagues?offset=1&limit=2").get_json()

    assert [league["id"] for league in page] == ids[1:3]
    assert len(client.get("/leagues").get_json()) == 5


def test_pagination_rejects_bad_limit(client):
    res = client.get("/leagues?limit=0")

    assert res.status_code == 400
    assert res.get_json()["rawErrors"] == ["limit must be between 1 and 100"]


def test_id_beyond_column_range_is_not_found(client):
    res = client.get("/leagues/99999999999999999999")

    assert res.status_code == 404
    assert res.get_json()["success"] is False


def test_offset_beyond_column_range(client):
    res = client.get("/leagues?offset=99999999999999999999")

    assert res.status_code == 400
    assert res.get_json()["rawErrors"] == ["offset must not be greater than 2147483647"]
