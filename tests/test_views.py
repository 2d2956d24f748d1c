import json

from client.endpoints import ENDPOINTS
from client.views import (
    IDLE_HINT,
    IDLE_HISTORY_HINT,
    LOADING_HINT,
    LOADING_HISTORY_HINT,
    button_label,
    describe,
    format_timestamp,
    is_disabled,
)
from core.models.network import RequestState

HEALTH, TEST, INFO, HISTORY = ENDPOINTS


def test_idle_views():
    idle = RequestState()
    assert describe(TEST, idle).lines == [IDLE_HINT]
    assert describe(TEST, idle).outlined
    assert describe(HISTORY, idle).lines == [IDLE_HISTORY_HINT]
    assert button_label(TEST, idle) == "Test"
    assert not is_disabled(idle)


def test_loading_views_disable_the_button():
    loading = RequestState(status="loading", request_id="r1")
    assert describe(INFO, loading).lines == [LOADING_HINT]
    assert describe(HISTORY, loading).lines == [LOADING_HISTORY_HINT]
    assert button_label(INFO, loading) == "Calling..."
    assert button_label(HISTORY, loading) == "Fetching..."
    assert is_disabled(loading)


def test_error_view_shows_message():
    view = describe(TEST, RequestState(status="error", error="Request failed with status 500"))
    assert view.severity == "error"
    assert view.lines == ["Request failed with status 500"]


def test_success_view_pretty_prints_json():
    payload = {"service": "pulseboard-api", "version": "1.0.0"}
    view = describe(INFO, RequestState(status="success", payload=payload))
    assert view.severity == "success"
    assert view.monospace
    assert "\n".join(view.lines) == json.dumps(payload, indent=2)


def test_history_view_lists_records():
    payload = {
        "count": 2,
        "results": [
            {"id": 2, "value": 0.5, "createdAt": "2026-01-01T10:00:00Z"},
            {"id": 1, "value": 0.25, "createdAt": "2026-01-01T09:00:00Z"},
        ],
    }
    view = describe(HISTORY, RequestState(status="success", payload=payload))
    assert view.lines[0] == "2 records returned"
    assert view.lines[1].startswith("Value: 0.5")
    assert view.lines[2].startswith("Value: 0.25")
    assert "Saved" in view.lines[1]


def test_format_timestamp_keeps_garbage():
    assert format_timestamp("yesterday") == "yesterday"
    assert format_timestamp("2026-01-01T00:00:00Z").startswith(("2025-12-31", "2026-01-01"))
