from client.scenes.base import BaseScene
from client.scenes.dashboard import DashboardScene

__all__ = ["BaseScene", "DashboardScene"]
