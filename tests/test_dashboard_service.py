import time
from types import SimpleNamespace

import pytest

from client.endpoints import ENDPOINTS
from client.services import DashboardService
from core.models.network import PendingRequest

HEALTH, TEST, INFO, HISTORY = ENDPOINTS


class FakeAPIClient:
    """Records requests; tests complete them by hand."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict | None]] = []
        self.pending_requests: dict[str, PendingRequest] = {}
        self.cleanups = 0

    def request(self, endpoint, method="GET", params=None):
        request_id = f"req-{len(self.calls) + 1}"
        self.calls.append((endpoint, method, params))
        self.pending_requests[request_id] = PendingRequest(status="pending", timestamp=time.time())
        return request_id

    def complete(self, request_id, data=None, error=None):
        self.pending_requests[request_id] = PendingRequest(
            status="completed",
            timestamp=time.time(),
            success=error is None,
            data=data,
            error=error,
        )

    def get_request_status(self, request_id):
        return self.pending_requests.get(request_id)

    def remove_request(self, request_id):
        self.pending_requests.pop(request_id, None)

    def cleanup_old_requests(self, max_age_seconds=300):
        self.cleanups += 1


@pytest.fixture
def api_client():
    return FakeAPIClient()


@pytest.fixture
def service(api_client):
    return DashboardService(SimpleNamespace(api_client=api_client))


def test_initial_state_is_idle(service):
    for endpoint in ENDPOINTS:
        assert service.state(endpoint).status == "idle"


def test_call_sets_loading_and_requests_path(service, api_client):
    request_id = service.call(HEALTH)

    assert request_id == "req-1"
    assert api_client.calls == [("/health", "GET", None)]
    assert service.state(HEALTH).status == "loading"


def test_history_call_sends_limit(service, api_client):
    service.set_history_limit("3")
    service.call(HISTORY)
    assert api_client.calls == [("/history", "GET", {"limit": 3})]


def test_history_limit_defaults_to_ten(service, api_client):
    service.call(HISTORY)
    assert api_client.calls[0][2] == {"limit": 10}


@pytest.mark.parametrize(("text", "expected"), [("", 1), ("0", 1), ("-2", 1), ("x", 1), ("25", 25)])
def test_set_history_limit(service, text, expected):
    assert service.set_history_limit(text) == expected
    assert service.history_limit == expected


def test_call_is_ignored_while_loading(service, api_client):
    service.call(TEST)
    assert service.call(TEST) is None
    assert len(api_client.calls) == 1


def test_poll_settles_success(service, api_client):
    request_id = service.call(INFO)
    service.poll()
    assert service.state(INFO).status == "loading"

    api_client.complete(request_id, data={"service": "pulseboard-api"})
    service.poll()

    state = service.state(INFO)
    assert state.status == "success"
    assert state.payload == {"service": "pulseboard-api"}
    assert request_id not in api_client.pending_requests
    assert api_client.cleanups == 2


def test_rejected_request_becomes_error_and_reenables(service, api_client):
    request_id = service.call(TEST)
    api_client.complete(request_id, error="Request failed with status 500")
    service.poll()

    state = service.state(TEST)
    assert state.status == "error"
    assert state.error == "Request failed with status 500"
    assert not state.is_loading

    assert service.call(TEST) == "req-2"


def test_missing_error_message_falls_back(service, api_client):
    request_id = service.call(TEST)
    api_client.complete(request_id, error="")
    service.poll()
    assert service.state(TEST).error == "Unknown error"


def test_endpoints_settle_independently(service, api_client):
    health_id = service.call(HEALTH)
    service.call(INFO)

    api_client.complete(health_id, data={"status": "ok"})
    service.poll()

    assert service.state(HEALTH).status == "success"
    assert service.state(INFO).status == "loading"
