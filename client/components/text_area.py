import pygame

from client.components.base import BaseComponent
from client.theme import FONT_NAMES, FONT_SIZE_MAP, SEVERITY_COLORS
from client.views import StatusView
from core.types import Coordinate


class TextArea(BaseComponent):
    """Alert-style block showing the lines of a StatusView."""

    type = "textarea"

    def __init__(
        self, window: pygame.Surface, position: Coordinate, width: int, max_lines: int = 6
    ) -> None:
        self.width = width
        self.max_lines = max_lines
        self.view = StatusView("info")
        super().__init__(window, position, "", hover=False)

    def set_view(self, view: StatusView) -> None:
        self.view = view

    def _visible_lines(self) -> list[str]:
        lines = self.view.lines
        if len(lines) <= self.max_lines:
            return lines
        hidden = len(lines) - self.max_lines + 1
        return [*lines[: self.max_lines - 1], f"... {hidden} more lines"]

    def _init_surface(self) -> pygame.Surface:
        text_type = "mono" if self.view.monospace else "text"
        font = pygame.font.SysFont(FONT_NAMES[text_type], FONT_SIZE_MAP[text_type][self.size])
        colors = SEVERITY_COLORS[self.view.severity]
        padding = 10
        line_height = font.get_linesize()

        lines = self._visible_lines()
        height = padding * 2 + line_height * max(1, len(lines))
        surface = self._create_surface((self.width, height))
        rect = surface.get_rect()

        if not self.view.outlined:
            pygame.draw.rect(surface, colors["bg"], rect, border_radius=4)
        pygame.draw.rect(surface, colors["border"], rect, border_radius=4, width=1)

        for i, line in enumerate(lines):
            text_surface = font.render(line, True, colors["text"])
            surface.blit(text_surface, (padding, padding + i * line_height))

        return surface

    def measure(self) -> int:
        """Height in pixels the current view will take."""
        return self._init_surface().get_height()
