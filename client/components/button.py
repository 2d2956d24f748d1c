import pygame

from client.components.base import BaseComponent


class Button(BaseComponent):
    type = "button"

    def _init_surface(self) -> pygame.Surface:
        return self._draw_box()
