from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

from client.components import BaseComponent
from client.theme import BACKGROUND

if TYPE_CHECKING:
    from client.app import ClientApp


class BaseScene(ABC):
    """Base class for every dashboard screen."""

    def __init__(self, app: "ClientApp") -> None:
        """
        Initialize a new instance of the BaseScene class.

        Args:
            app: Client App
        """

        self.app = app
        self.components: list[BaseComponent] = []

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Handle events.

        Args:
            event: Event to be processed
        """
        raise NotImplementedError

    @abstractmethod
    def render(self) -> None:
        """
        Render the scene (draw on the screen).
        """
        raise NotImplementedError

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.app.running = False

        self.handle_event(event)

        for component in self.components:
            component.handle_event(event)

    def _render(self) -> None:
        self.app.screen.fill(BACKGROUND)

        # Scene first so components are drawn on top of it
        self.render()

        for component in self.components:
            component.render()

    def update(self) -> None:
        """Update the scene logic."""

        for event in pygame.event.get():
            self._handle_event(event)

        self._render()

    def add_component(self, component: BaseComponent) -> None:
        self.components.append(component)
