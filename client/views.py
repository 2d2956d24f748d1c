"""
Render model for the dashboard cards.

Everything here is a pure function of an endpoint and its RequestState, so the
pygame scene only has to draw what these functions return.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.models.endpoint import Endpoint
from core.models.network import RequestState
from core.types import Severity

IDLE_HINT = "No call yet. Press the button to fetch a response."
IDLE_HISTORY_HINT = "No history loaded yet."
LOADING_HINT = "Waiting for response..."
LOADING_HISTORY_HINT = "Retrieving saved values..."


@dataclass(frozen=True)
class StatusView:
    severity: Severity
    lines: list[str] = field(default_factory=list)
    outlined: bool = False
    monospace: bool = False


def button_label(endpoint: Endpoint, state: RequestState) -> str:
    if state.is_loading:
        return "Fetching..." if endpoint.paginated else "Calling..."
    return endpoint.label


def is_disabled(state: RequestState) -> bool:
    return state.is_loading


def format_timestamp(value: str) -> str:
    """ISO8601 from the API to local time; unparseable values are shown as-is."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return str(value)
    return parsed.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def history_lines(payload: Any) -> list[str]:
    if not isinstance(payload, dict):
        return [json.dumps(payload)]

    lines = [f"{payload.get('count', 0)} records returned"]
    for entry in payload.get("results", []):
        lines.append(
            f"Value: {entry.get('value')}    Saved {format_timestamp(entry.get('createdAt'))}"
        )
    return lines


def describe(endpoint: Endpoint, state: RequestState) -> StatusView:
    if state.status == "idle":
        hint = IDLE_HISTORY_HINT if endpoint.paginated else IDLE_HINT
        return StatusView("info", [hint], outlined=True)

    if state.status == "loading":
        hint = LOADING_HISTORY_HINT if endpoint.paginated else LOADING_HINT
        return StatusView("info", [hint])

    if state.status == "error":
        return StatusView("error", [state.error or ""])

    if endpoint.paginated:
        return StatusView("success", history_lines(state.payload))

    return StatusView("success", json.dumps(state.payload, indent=2).splitlines(), monospace=True)
