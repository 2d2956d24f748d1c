from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Literal

import pygame

from client.theme import FONT_NAMES, FONT_SIZE_MAP, SIZE_MAP, VARIANT_MAP
from core.types import (
    ComponentSize,
    ComponentType,
    ComponentVariant,
    Coordinate,
    FontSize,
    Thickness,
)


class BaseComponent(ABC):
    """
    Abstract base class for all components.
    """

    type: ComponentType

    def __init__(
        self,
        window: pygame.Surface,
        position: Coordinate,
        label: str,
        variant: ComponentVariant = "standard",
        size: ComponentSize = "md",
        text_type: FontSize = "standard",
        hover: bool = True,
        *,
        callback: Callable[[], object] = lambda: None,
    ) -> None:
        """
        Initialize the component.

        Args:
            window (pygame.Surface): The window where the component will be drawn.
            position (Coordinate): Top-left position of the component.
            label (str): Text shown on the component.
            variant (str): The variant of the component.
            size (str): The size of the component.
            callback (Callable): A callback function to be executed on click.
        """
        self.label = label
        self.window = window
        self.position = position
        self.variant: ComponentVariant = variant
        self.size: ComponentSize = size
        self.text_type: FontSize = text_type
        self.hover = hover
        self.callback = callback
        self.is_focused = False
        self.is_disabled = False
        self.surface = self._init_surface()
        self.rect = self.surface.get_rect(topleft=position)

    @abstractmethod
    def _init_surface(self) -> pygame.Surface:
        """
        Initialize the surface of the component.
        """
        raise NotImplementedError("Subclasses must implement this method.")

    def _create_surface(self, size: Coordinate) -> pygame.Surface:
        return pygame.surface.Surface(size, flags=pygame.SRCALPHA)

    def _get_color(self, surface_part: Literal["bg", "text", "border"]) -> pygame.Color:
        colors = VARIANT_MAP[not self.is_disabled][self.is_focused]

        return colors[self.variant][surface_part]

    def _get_font(self) -> pygame.font.Font:
        font_size = FONT_SIZE_MAP[self.text_type][self.size]

        return pygame.font.SysFont(FONT_NAMES[self.text_type], font_size)

    def _get_size(self) -> tuple[Coordinate, Thickness]:
        return SIZE_MAP[self.is_focused][self.type][self.size]

    def _draw_box(self, with_text: bool = True) -> pygame.Surface:
        """
        Rounded box with a centered label, shared by buttons and inputs.
        """
        cordinate, thickness = self._get_size()
        middle = (cordinate[0] // 2, cordinate[1] // 2)
        radius = 6

        surface = self._create_surface(cordinate)
        rect = surface.get_rect()

        pygame.draw.rect(surface, self._get_color("bg"), rect, border_radius=radius)
        pygame.draw.rect(
            surface, self._get_color("border"), rect, border_radius=radius, width=thickness
        )

        if with_text:
            text_surface = self._get_font().render(self.label, True, self._get_color("text"))
            surface.blit(text_surface, text_surface.get_rect(center=middle))

        return surface

    def _handle_hover(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION and self.hover:
            self.is_focused = self.rect.collidepoint(event.pos)

    def _handle_click(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RETURN and self.is_focused:
                self._callback()

    def _handle_event(self, event: pygame.event.Event) -> None:
        return

    def _render(self) -> None:
        return

    def _callback(self) -> None:
        self.callback()

    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Handle events for the component.
        """
        if self.is_disabled:
            return
        self._handle_event(event)
        self._handle_hover(event)
        self._handle_click(event)

    def render(self) -> None:
        """
        Render the component.
        """
        self._render()
        self.surface = self._init_surface()
        self.rect = self.surface.get_rect(topleft=self.position)
        self.window.blit(self.surface, self.rect)
