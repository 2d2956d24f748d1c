from abc import ABC, abstractmethod

from core.config import Settings
from core.logging_config import setup_logging


class App(ABC):
    """Common base for the server and the dashboard client."""

    component: str = "app"
    settings: Settings

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def configure_logging(self) -> None:
        setup_logging(self.component, self.settings.log_level)

    @abstractmethod
    def run(self) -> None:
        raise NotImplementedError
