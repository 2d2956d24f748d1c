from core.models.endpoint import Endpoint

ENDPOINTS: list[Endpoint] = [
    Endpoint("Health", "/health", "Simple heartbeat check"),
    Endpoint("Test", "/test", "Returns a random number and saves it"),
    Endpoint("Info", "/info", "Static metadata payload"),
    Endpoint(
        "History", "/history", "View recently persisted random numbers", paginated=True
    ),
]
"""Endpoints shown on the dashboard, in display order."""
