import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from runtime import SessionRegistry


@pytest.fixture
def client(clock):
    return TestClient(create_app(registry=SessionRegistry(clock=clock)))


def new_match(client):
    response = client.post("/matches", json={})
    assert response.status_code == 200
    return response.json()["match_id"]


def test_create_match_returns_opening_frame(client):
    response = client.post("/matches", json={"match_id": "alpha"})
    body = response.json()

    assert body["match_id"] == "alpha"
    assert body["frame"]["phase"] == "playing"
    assert body["frame"]["logs"] == ["Match started. Turn order: Up -> Left -> Down -> Right."]

    assert client.post("/matches", json={"match_id": "alpha"}).status_code == 409


def test_command_round_trip(client):
    match_id = new_match(client)

    response = client.post(
        f"/matches/{match_id}/commands",
        json={"actor": "up", "action": "shoot", "direction": "down"},
    )

    assert response.status_code == 200
    frame = response.json()
    assert frame["consumed"] is True
    assert [e["kind"] for e in frame["events"]] == ["block-destroyed", "turn-advanced"]
    assert frame["board"]["cells"][2][5] == 0
    assert frame["active"] == "left"


def test_invalid_command_names_are_unprocessable(client):
    match_id = new_match(client)

    response = client.post(
        f"/matches/{match_id}/commands",
        json={"actor": "up", "action": "dance", "direction": "down"},
    )

    assert response.status_code == 422


def test_reset_and_delete(client):
    match_id = new_match(client)
    client.post(
        f"/matches/{match_id}/commands",
        json={"actor": "up", "action": "shoot", "direction": "down"},
    )

    frame = client.post(f"/matches/{match_id}/reset").json()
    assert frame["board"]["cells"][2][5] == 1
    assert frame["active"] == "up"

    assert client.delete(f"/matches/{match_id}").json() == {"success": True}
    assert client.get(f"/matches/{match_id}").status_code == 404
    assert client.get("/status").json() == {"matches": 0}


def test_unknown_match_is_not_found(client):
    assert client.get("/matches/nope").status_code == 404
    response = client.post(
        "/matches/nope/commands",
        json={"actor": "up", "action": "move", "direction": "down"},
    )
    assert response.status_code == 404
