import time

import httpx
import pytest

from client.api import APIClient


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/health":
        return httpx.Response(200, json={"status": "ok", "timestamp": "2026-01-01T00:00:00Z"})
    if request.url.path == "/history":
        limit = int(request.url.params["limit"])
        return httpx.Response(200, json={"count": 0, "results": [], "limit": limit})
    if request.url.path == "/test":
        return httpx.Response(500, json={"error": "Unable to save random value"})
    if request.url.path == "/broken":
        return httpx.Response(200, text="<html>not json</html>")
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def api_client():
    client = APIClient("http://api.test/", transport=httpx.MockTransport(_handler))
    yield client
    client.close()


def test_success_stores_parsed_body(api_client):
    api_client._make_request("r1", "GET", "/health", None)

    result = api_client.get_request_status("r1")
    assert result.status == "completed"
    assert result.success is True
    assert result.status_code == 200
    assert result.data["status"] == "ok"


def test_query_params_are_sent(api_client):
    api_client._make_request("r1", "GET", "/history", {"limit": 7})
    assert api_client.get_request_status("r1").data["limit"] == 7


def test_non_2xx_is_a_failure_with_status(api_client):
    api_client._make_request("r1", "GET", "/test", None)

    result = api_client.get_request_status("r1")
    assert result.success is False
    assert result.status_code == 500
    assert result.error == "Request failed with status 500"


def test_transport_failure_keeps_exception_message(api_client):
    api_client._make_request("r1", "GET", "/unreachable", None)

    result = api_client.get_request_status("r1")
    assert result.success is False
    assert result.status_code is None
    assert result.error == "connection refused"


def test_unparseable_body_is_a_failure(api_client):
    api_client._make_request("r1", "GET", "/broken", None)

    result = api_client.get_request_status("r1")
    assert result.success is False
    assert result.error


def test_request_runs_in_background(api_client):
    request_id = api_client.request("/health")

    deadline = time.time() + 5
    while api_client.get_request_status(request_id).status == "pending":
        assert time.time() < deadline
        time.sleep(0.01)

    assert api_client.get_request_status(request_id).success is True


def test_remove_and_cleanup(api_client):
    api_client._make_request("old", "GET", "/health", None)
    api_client._make_request("new", "GET", "/health", None)
    api_client.pending_requests["old"].timestamp -= 600

    api_client.cleanup_old_requests(max_age_seconds=300)
    assert api_client.get_request_status("old") is None
    assert api_client.get_request_status("new") is not None

    api_client.remove_request("new")
    assert api_client.get_request_status("new") is None
