from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from client.components import Button, Input, TextArea
from client.endpoints import ENDPOINTS
from client.scenes.base import BaseScene
from client.theme import CARD, CARD_BORDER, PRIMARY, TEXT, TEXT_SECONDARY
from client.views import button_label, describe, is_disabled
from core.models.endpoint import Endpoint

if TYPE_CHECKING:
    from client.app import ClientApp

MARGIN = 32
PADDING = 16
GAP = 10
HEADER_HEIGHT = 110
SCROLL_STEP = 40


@dataclass
class Card:
    endpoint: Endpoint
    button: Button
    status: TextArea
    limit_input: Input | None = None


class DashboardScene(BaseScene):
    """One card per endpoint: trigger button, path chip, description and the last response."""

    def __init__(self, app: "ClientApp") -> None:
        super().__init__(app)
        self.service = app.dashboard_service
        self.scroll = 0
        self.content_height = 0

        self.title_font = pygame.font.SysFont("Arial", 36, bold=True)
        self.text_font = pygame.font.SysFont("Arial", 17)
        self.chip_font = pygame.font.SysFont("Courier New", 15, bold=True)

        width = self.app.screen.get_width() - 2 * (MARGIN + PADDING)
        self.cards: list[Card] = []
        for endpoint in ENDPOINTS:
            card = Card(
                endpoint=endpoint,
                button=Button(
                    self.app.screen,
                    (0, 0),
                    endpoint.label,
                    "primary",
                    callback=lambda e=endpoint: self.service.call(e),
                ),
                status=TextArea(
                    self.app.screen, (0, 0), width, max_lines=12 if endpoint.paginated else 6
                ),
            )
            self.add_component(card.button)
            self.add_component(card.status)

            if endpoint.paginated:
                card.limit_input = Input(
                    self.app.screen,
                    (0, 0),
                    str(self.service.history_limit),
                    "outline",
                    "sm",
                    callback=self._on_limit_change,
                )
                self.add_component(card.limit_input)

            self.cards.append(card)

    def _on_limit_change(self) -> None:
        for card in self.cards:
            if card.limit_input is not None:
                limit = self.service.set_history_limit(card.limit_input.value)
                card.limit_input.value = str(limit)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.app.running = False
        elif event.type == pygame.MOUSEWHEEL:
            max_scroll = max(0, self.content_height - self.app.screen.get_height())
            self.scroll = max(0, min(max_scroll, self.scroll - event.y * SCROLL_STEP))

    def render(self) -> None:
        screen = self.app.screen
        width = screen.get_width() - 2 * MARGIN

        title = self.title_font.render("Service Pulseboard", True, TEXT)
        screen.blit(title, (MARGIN, MARGIN - self.scroll))
        subtitle = self.text_font.render(
            f"Fire the backend endpoints at {self.app.settings.api_base_url} with a single click.",
            True,
            TEXT_SECONDARY,
        )
        screen.blit(subtitle, (MARGIN, MARGIN + 48 - self.scroll))

        y = HEADER_HEIGHT
        for card in self.cards:
            y = self._layout_card(card, MARGIN, y, width) + GAP * 2

        self.content_height = y + MARGIN

    def _layout_card(self, card: Card, x: int, y: int, width: int) -> int:
        """Draw the card frame and position its components. Returns the card bottom."""
        screen = self.app.screen
        state = self.service.state(card.endpoint)
        top = y - self.scroll

        card.button.label = button_label(card.endpoint, state)
        card.button.is_disabled = is_disabled(state)
        card.status.set_view(describe(card.endpoint, state))

        button_h = card.button.surface.get_height()
        text_h = self.text_font.get_linesize()
        status_h = card.status.measure()
        height = PADDING * 2 + button_h + GAP + text_h + GAP + status_h

        frame = pygame.Rect(x, top, width, height)
        pygame.draw.rect(screen, CARD, frame, border_radius=8)
        pygame.draw.rect(screen, CARD_BORDER, frame, width=1, border_radius=8)

        inner_x = x + PADDING
        row_y = top + PADDING
        card.button.position = (inner_x, row_y)

        chip = self.chip_font.render(card.endpoint.path, True, PRIMARY)
        chip_x = inner_x + card.button.surface.get_width() + GAP * 2
        chip_rect = chip.get_rect(midleft=(chip_x + 10, row_y + button_h // 2))
        pygame.draw.rect(screen, PRIMARY, chip_rect.inflate(20, 10), width=1, border_radius=12)
        screen.blit(chip, chip_rect)

        if card.limit_input is not None:
            label = self.text_font.render("Limit (1-50)", True, TEXT_SECONDARY)
            label_x = chip_rect.right + GAP * 4
            screen.blit(label, label.get_rect(midleft=(label_x, row_y + button_h // 2)))
            input_y = row_y + (button_h - card.limit_input.surface.get_height()) // 2
            card.limit_input.position = (label_x + label.get_width() + GAP, input_y)

        desc_y = row_y + button_h + GAP
        description = self.text_font.render(card.endpoint.description, True, TEXT_SECONDARY)
        screen.blit(description, (inner_x, desc_y))

        card.status.position = (inner_x, desc_y + text_h + GAP)

        return y + height
