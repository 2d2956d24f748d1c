"""
API service for asynchronous communication with the server
using threads to avoid blocking the main Pygame loop
"""

import logging
import threading
import time
import uuid

import httpx

from core.constants import UNKNOWN_ERROR_MESSAGE
from core.models.network import PendingRequest
from core.types import HTTPMethod

logger = logging.getLogger(__name__)


class APIClient:
    """Async API client for communication with the server."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize a new instance of the APIClient class.

        Args:
            base_url: Base URL of the API, e.g. http://localhost:4000
            timeout: Request timeout in seconds, None to wait forever
            transport: Custom httpx transport (used by tests)
        """
        self.client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"User-Agent": "Pulseboard Client"},
            timeout=timeout,
            transport=transport,
        )

        self.pending_requests: dict[str, PendingRequest] = {}

        # Lock for thread-safe access to the pending table
        self.lock = threading.Lock()

    def _make_request(
        self, request_id: str, method: HTTPMethod, endpoint: str, params: dict | None
    ) -> None:
        """
        Do a request to the server on a separate thread

        Args:
            request_id: ID of the request
            method: HTTP method
            endpoint: API Endpoint
            params: Query string parameters
        """
        try:
            response = self.client.request(method, endpoint, params=params)

            if response.is_success:
                result = PendingRequest(
                    status="completed",
                    timestamp=time.time(),
                    success=True,
                    status_code=response.status_code,
                    data=response.json(),
                )
            else:
                message = f"Request failed with status {response.status_code}"
                result = PendingRequest(
                    status="completed",
                    timestamp=time.time(),
                    success=False,
                    status_code=response.status_code,
                    error=message,
                )
                logger.error(f"{method} {endpoint}: {message}")

        except Exception as e:
            result = PendingRequest(
                status="completed",
                timestamp=time.time(),
                success=False,
                error=str(e) or UNKNOWN_ERROR_MESSAGE,
            )

            logger.error(f"Request error for {method} {endpoint}: {e!r}")

        with self.lock:
            self.pending_requests[request_id] = result

    def request(
        self,
        endpoint: str,
        method: HTTPMethod = "GET",
        params: dict | None = None,
    ) -> str:
        request_id = str(uuid.uuid4())

        # Register before starting so a fast response is never overwritten
        with self.lock:
            self.pending_requests[request_id] = PendingRequest(
                status="pending", timestamp=time.time()
            )

        thread = threading.Thread(
            target=self._make_request,
            args=(request_id, method, endpoint, params),
        )
        thread.daemon = True
        thread.start()

        return request_id

    def get_request_status(self, request_id: str) -> PendingRequest | None:
        """
        Check the status of a request.

        Args:
            request_id: ID of the request

        Returns:
            Request data or None if not found
        """
        with self.lock:
            return self.pending_requests.get(request_id)

    def remove_request(self, request_id: str) -> None:
        with self.lock:
            self.pending_requests.pop(request_id, None)

    def cleanup_old_requests(self, max_age_seconds: int = 300) -> None:
        """
        Remove completed requests older than ``max_age_seconds``.
        """
        current_time = time.time()

        with self.lock:
            request_ids = list(self.pending_requests.keys())

            for request_id in request_ids:
                request = self.pending_requests[request_id]
                if (
                    request.status == "completed"
                    and current_time - request.timestamp > max_age_seconds
                ):
                    del self.pending_requests[request_id]

    def close(self) -> None:
        self.client.close()
