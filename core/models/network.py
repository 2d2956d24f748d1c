from dataclasses import dataclass
from typing import Any, Literal

from core.types import RequestStatus


@dataclass
class PendingRequest:
    status: Literal["pending", "completed"]
    timestamp: float  # Time when request was created or completed
    success: bool | None = None  # None when pending, True/False when completed
    status_code: int | None = None  # HTTP status, None on transport failure
    data: Any = None  # Parsed body when successful
    error: str | None = None  # Error message when failed


@dataclass(frozen=True)
class RequestState:
    """The dashboard's view of the latest call to one endpoint."""

    status: RequestStatus = "idle"
    payload: Any = None
    error: str | None = None
    request_id: str | None = None  # token of the request that owns this state

    @property
    def is_loading(self) -> bool:
        return self.status == "loading"


IDLE = RequestState()
