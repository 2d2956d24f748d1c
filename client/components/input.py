from collections.abc import Callable

import pygame

from client.components.base import BaseComponent
from core.types import ComponentSize, ComponentVariant, Coordinate


class Input(BaseComponent):
    """Single-line numeric input. ``callback`` receives nothing; read ``value``."""

    type = "input"

    def __init__(
        self,
        window: pygame.Surface,
        position: Coordinate,
        label: str,
        variant: ComponentVariant = "outline",
        size: ComponentSize = "sm",
        *,
        max_length: int = 3,
        callback: Callable[[], object] = lambda: None,
    ) -> None:
        self.value: str = label
        self.active: bool = False
        self.max_length = max_length
        self.time = {"elapsed_time": 0, "last_tick": pygame.time.get_ticks()}
        self.show_cursor = False
        super().__init__(window, position, label, variant, size, callback=callback)

    def _init_surface(self) -> pygame.Surface:
        return self._draw_box()

    def _render(self) -> None:
        t1 = pygame.time.get_ticks()
        self.time["elapsed_time"] += t1 - self.time["last_tick"]
        self.time["last_tick"] = t1

        if self.active:
            self.is_focused = True
            if self.time["elapsed_time"] > 500:
                self.time["elapsed_time"] = 0
                self.show_cursor = not self.show_cursor
            self.label = self.value + ("|" if self.show_cursor else " ")
        else:
            self.label = self.value

    def _callback(self) -> None:
        self.active = not self.active
        if not self.active:
            self.callback()

    def _handle_hover(self, event: pygame.event.Event) -> None:
        if not self.active:
            super()._handle_hover(event)

    def _handle_event(self, event: pygame.event.Event) -> None:
        if not self.active:
            return

        if event.type == pygame.MOUSEBUTTONDOWN and not self.rect.collidepoint(event.pos):
            self._callback()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.value = self.value[:-1]
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.active = False
                self.callback()
            elif event.unicode.isdigit() and len(self.value) < self.max_length:
                self.value += event.unicode

    def _handle_click(self, event: pygame.event.Event) -> None:
        # keyboard input is handled by _handle_event, only the mouse toggles editing
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
