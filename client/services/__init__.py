from client.services.dashboard import DashboardService

__all__ = ["DashboardService"]
