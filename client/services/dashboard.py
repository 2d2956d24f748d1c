import logging
from typing import TYPE_CHECKING

from client.services.base import ServiceBase
from client.store import DashboardStore, Settle, Trigger
from core.constants import HISTORY_DEFAULT_LIMIT, UNKNOWN_ERROR_MESSAGE
from core.models.endpoint import Endpoint
from core.models.network import RequestState

if TYPE_CHECKING:
    from client.app import ClientApp

logger = logging.getLogger(__name__)


class DashboardService(ServiceBase):
    """Fires endpoint calls and folds their results into the dashboard store."""

    def __init__(self, app: "ClientApp") -> None:
        super().__init__(app)
        self.store = DashboardStore()
        self.history_limit: int = HISTORY_DEFAULT_LIMIT

    def state(self, endpoint: Endpoint) -> RequestState:
        return self.store.get(endpoint.path)

    def set_history_limit(self, text: str) -> int:
        """Numeric input for the history card. Empty or non-positive becomes 1."""
        try:
            value = int(text.strip())
        except ValueError:
            value = 0
        self.history_limit = value if value > 0 else 1
        return self.history_limit

    # ——— Actions ———
    def call(self, endpoint: Endpoint) -> str | None:
        if self.state(endpoint).is_loading:
            logger.debug(f"{endpoint.path} request already in progress.")
            return None

        params = {"limit": self.history_limit} if endpoint.paginated else None
        request_id = self.api_client.request(endpoint.path, "GET", params=params)
        self.store.dispatch(Trigger(endpoint.path, request_id))
        return request_id

    def poll(self) -> None:
        """Settle every loading endpoint whose request has completed."""
        api_client = self.api_client

        for path, state in self.store.loading().items():
            if state.request_id is None:
                continue
            status = api_client.get_request_status(state.request_id)
            if status is None or status.status == "pending":
                continue

            api_client.remove_request(state.request_id)
            self.store.dispatch(
                Settle(
                    path,
                    state.request_id,
                    success=bool(status.success),
                    payload=status.data,
                    error=None if status.success else (status.error or UNKNOWN_ERROR_MESSAGE),
                )
            )

        api_client.cleanup_old_requests()
