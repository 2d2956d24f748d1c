"""
Dashboard state container.

Every endpoint path maps to one RequestState. The mapping is only changed
through ``reduce`` so the render loop always sees a consistent snapshot.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from core.models.network import IDLE, RequestState


@dataclass(frozen=True)
class Trigger:
    path: str
    request_id: str


@dataclass(frozen=True)
class Settle:
    path: str
    request_id: str
    success: bool
    payload: Any = None
    error: str | None = None


type Action = Trigger | Settle


def reduce(states: Mapping[str, RequestState], action: Action) -> dict[str, RequestState]:
    """Return the new mapping after ``action``; ``states`` is left untouched."""
    if isinstance(action, Trigger):
        loading = RequestState(status="loading", request_id=action.request_id)
        return {**states, action.path: loading}

    if not isinstance(action, Settle):
        raise TypeError(f"Unknown action: {action!r}")

    current = states.get(action.path, IDLE)
    # stale response from a request that is no longer the latest one
    if not current.is_loading or current.request_id != action.request_id:
        return dict(states)

    if action.success:
        new_state = RequestState(
            status="success", payload=action.payload, request_id=action.request_id
        )
    else:
        new_state = RequestState(status="error", error=action.error, request_id=action.request_id)

    return {**states, action.path: new_state}


class DashboardStore:
    def __init__(self) -> None:
        self.states: dict[str, RequestState] = {}

    def get(self, path: str) -> RequestState:
        return self.states.get(path, IDLE)

    def dispatch(self, action: Action) -> RequestState:
        self.states = reduce(self.states, action)
        return self.get(action.path)

    def loading(self) -> dict[str, RequestState]:
        return {path: state for path, state in self.states.items() if state.is_loading}
