"""
Pulseboard dashboard client - application factory
"""

import logging

import pygame

from client.api import APIClient
from client.scenes import DashboardScene
from client.services import DashboardService
from core.abstract import App
from core.config import Settings

logger = logging.getLogger(__name__)


class ClientApp(App):
    """Dashboard window"""

    component = "client"
    screen: pygame.Surface
    clock: pygame.time.Clock
    running: bool = False
    dashboard_service: DashboardService

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        self.api_client = APIClient(
            self.settings.api_base_url, timeout=self.settings.client_request_timeout
        )
        self.dashboard_service = DashboardService(self)

    def run(self) -> None:
        self.configure_logging()
        logger.info(f"Dashboard targeting {self.settings.api_base_url}")

        pygame.init()

        pygame.display.set_caption(self.settings.client_title)
        self.screen = pygame.display.set_mode(
            [self.settings.client_width, self.settings.client_height]
        )

        self.clock = pygame.time.Clock()
        self.running = True

        scene = DashboardScene(self)
        while self.running:
            self.clock.tick(self.settings.client_fps)

            # results from the request threads are folded in on this thread only
            self.dashboard_service.poll()
            scene.update()

            pygame.display.flip()

        self.api_client.close()
        pygame.quit()
