from __future__ import annotations

import fakeredis
from fastapi.testclient import TestClient

from guessing_game.game_store import SECRET_KEY_PREFIX


def _guess(client: TestClient, game_id: str, text: str) -> dict:
    resp = client.post(f"/game/{game_id}/guess", json={"text": text})
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_healthcheck_and_info(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, _ = client_and_redis

    assert client.get("/healthcheck").json() == {"status": "ok"}
    assert client.get("/info").json()["name"] == "guessing-game"


def test_create_game_hides_secret(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, r = client_and_redis

    resp = client.post("/game")
    assert resp.status_code == 201
    state = resp.json()

    assert state["phase"] == "playing"
    assert state["attempts"] == 0
    assert "secret" not in state
    assert r.get(f"{SECRET_KEY_PREFIX}{state['game_id']}") == "42"


def test_full_game_over_http(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, _ = client_and_redis
    gid = client.post("/game").json()["game_id"]

    bad = _guess(client, gid, "abc")
    assert bad["accepted"] is False
    assert bad["messages"] == []
    assert bad["state"]["rejected_inputs"] == 1

    high = _guess(client, gid, "100")
    assert high["messages"] == ["You guessed: 100", "Too big!"]
    assert high["outcome"] == "too_big"

    low = _guess(client, gid, "1")
    assert low["messages"] == ["You guessed: 1", "Too small!"]

    win = _guess(client, gid, "42\n")
    assert win["messages"] == ["You guessed: 42", "You win!"]
    assert win["state"]["phase"] == "won"
    assert win["state"]["attempts"] == 3

    stored = client.get(f"/game/{gid}").json()
    assert stored["phase"] == "won"
    assert stored["last_outcome"] == "win"


def test_guess_after_win_is_rejected(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, _ = client_and_redis
    gid = client.post("/game").json()["game_id"]
    _guess(client, gid, "42")

    resp = client.post(f"/game/{gid}/guess", json={"text": "42"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Game is completed"


def test_busy_game_is_rejected(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, r = client_and_redis
    gid = client.post("/game").json()["game_id"]
    r.set(f"lock:guessing:{gid}", "someone-else")

    resp = client.post(f"/game/{gid}/guess", json={"text": "7"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Game is busy"

    # The other holder's lock is left alone.
    assert r.get(f"lock:guessing:{gid}") == "someone-else"


def test_unknown_game_is_404(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, _ = client_and_redis
    missing = "00000000-0000-0000-0000-000000000000"

    assert client.get(f"/game/{missing}").status_code == 404
    assert client.post(f"/game/{missing}/guess", json={"text": "1"}).status_code == 404


def test_list_games(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, _ = client_and_redis
    ids = {client.post("/game").json()["game_id"] for _ in range(3)}

    games = client.get("/game").json()["games"]
    assert {g["game_id"] for g in games} == ids


def test_game_vanishing_before_guess_is_404(client_and_redis: tuple[TestClient, fakeredis.FakeRedis]) -> None:
    client, r = client_and_redis
    gid = client.post("/game").json()["game_id"]
    # State document still present, secret gone: the lookup under the lock fails.
    r.delete(f"{SECRET_KEY_PREFIX}{gid}")

    resp = client.post(f"/game/{gid}/guess", json={"text": "7"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Game not found"
