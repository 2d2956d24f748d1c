import logging
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from server.app import create_app
from server.repository import InMemoryRandomResultRepository


def _created_at(entry):
    return datetime.fromisoformat(entry["createdAt"].replace("Z", "+00:00"))


def _fill(client, count):
    return [client.get("/test").json() for _ in range(count)]


def test_test_endpoint_saves_and_returns_value(client, repository):
    resp = client.get("/test")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"message", "random", "id", "createdAt"}
    assert body["message"] == "Test endpoint reached"
    assert 0 <= body["random"] < 1
    assert round(body["random"], 6) == body["random"]
    assert len(repository) == 1

    history = client.get("/history").json()
    assert history["results"][0]["id"] == body["id"]
    assert history["results"][0]["value"] == body["random"]


def test_each_test_call_adds_exactly_one_row(client, repository):
    for expected in range(1, 4):
        client.get("/test")
        assert len(repository) == expected


def test_ids_increase_with_creation_order(client):
    ids = [entry["id"] for entry in _fill(client, 4)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 4


def test_history_returns_newest_first(client):
    created = _fill(client, 5)

    resp = client.get("/history", params={"limit": 3})
    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 3
    assert [r["id"] for r in body["results"]] == [c["id"] for c in reversed(created)][:3]


def test_history_ordering_is_non_increasing(client):
    _fill(client, 8)
    results = client.get("/history", params={"limit": 50}).json()["results"]
    stamps = [_created_at(r) for r in results]
    assert stamps == sorted(stamps, reverse=True)


def test_history_on_empty_store(client):
    assert client.get("/history").json() == {"count": 0, "results": []}


@pytest.mark.parametrize(
    ("limit", "expected"),
    [
        (None, 10),
        ("abc", 10),
        ("", 10),
        ("0", 1),
        ("-7", 1),
        ("2.9", 2),
        ("50", 50),
        ("999", 50),
    ],
)
def test_history_limit_is_normalized(client, limit, expected):
    _fill(client, 60)

    params = {} if limit is None else {"limit": limit}
    resp = client.get("/history", params=params)

    assert resp.status_code == 200
    assert resp.json()["count"] == expected
    assert len(resp.json()["results"]) == expected


def test_save_failure_returns_fixed_error(unreachable_client, caplog):
    with caplog.at_level(logging.ERROR):
        resp = unreachable_client.get("/test")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Unable to save random value"}
    assert "Failed to persist random value" in caplog.text


def test_history_failure_returns_fixed_error(unreachable_client, caplog):
    with caplog.at_level(logging.ERROR):
        resp = unreachable_client.get("/history", params={"limit": 5})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Unable to fetch history"}
    assert "Failed to fetch history" in caplog.text


def test_health_and_info_unaffected_by_store_failure(unreachable_client):
    assert unreachable_client.get("/health").status_code == 200
    assert unreachable_client.get("/info").status_code == 200


def test_store_down_at_startup_still_serves(settings, caplog):
    class DownAtStartup(InMemoryRandomResultRepository):
        async def connect(self):
            raise ConnectionError("database unreachable")

        async def create_random_result(self, value):
            raise ConnectionError("database unreachable")

    with caplog.at_level(logging.ERROR):
        with TestClient(create_app(settings, DownAtStartup())) as down_client:
            assert down_client.get("/health").status_code == 200
            assert down_client.get("/info").status_code == 200

            resp = down_client.get("/test")
            assert resp.status_code == 500
            assert resp.json() == {"error": "Unable to save random value"}

    assert "Could not connect to the store at startup" in caplog.text
