import pygame

from core.types import (
    ComponentSize,
    ComponentType,
    ComponentVariant,
    Coordinate,
    FontSize,
    IsDisabled,
    IsFocused,
    Severity,
    Thickness,
)

# Palette
BACKGROUND = pygame.Color(247, 248, 250)
CARD = pygame.Color(255, 255, 255)
CARD_BORDER = pygame.Color(214, 219, 226)
PRIMARY = pygame.Color(0, 102, 204)
PRIMARY_DARK = pygame.Color(0, 82, 163)
TEXT = pygame.Color(33, 37, 41)
TEXT_SECONDARY = pygame.Color(108, 117, 125)
DISABLED_BG = pygame.Color(222, 226, 230)
DISABLED_TEXT = pygame.Color(150, 157, 164)
WHITE = pygame.Color(255, 255, 255)

SEVERITY_COLORS: dict[Severity, dict[str, pygame.Color]] = {
    "info": {
        "bg": pygame.Color(229, 246, 253),
        "border": pygame.Color(3, 169, 244),
        "text": pygame.Color(1, 67, 97),
    },
    "success": {
        "bg": pygame.Color(237, 247, 237),
        "border": pygame.Color(76, 175, 80),
        "text": pygame.Color(30, 70, 32),
    },
    "error": {
        "bg": pygame.Color(253, 237, 237),
        "border": pygame.Color(239, 83, 80),
        "text": pygame.Color(95, 33, 32),
    },
}

# Constants for the components
FOCUSED = ENABLED = True
NOT_FOCUSED = DISABLED = False

SIZE_MAP: dict[
    IsFocused, dict[ComponentType, dict[ComponentSize, tuple[Coordinate, Thickness]]]
] = {
    NOT_FOCUSED: {
        "button": {"sm": ((100, 30), 1), "md": ((140, 38), 1), "lg": ((180, 46), 2)},
        "input": {"sm": ((80, 30), 1), "md": ((120, 38), 1), "lg": ((160, 46), 2)},
    },
    FOCUSED: {
        "button": {"sm": ((100, 30), 2), "md": ((140, 38), 2), "lg": ((180, 46), 3)},
        "input": {"sm": ((80, 30), 2), "md": ((120, 38), 2), "lg": ((160, 46), 3)},
    },
}

VARIANT_MAP: dict[IsDisabled, dict[IsFocused, dict[ComponentVariant, dict[str, pygame.Color]]]] = {
    DISABLED: {
        NOT_FOCUSED: {
            "standard": {"bg": DISABLED_BG, "text": DISABLED_TEXT, "border": DISABLED_BG},
            "primary": {"bg": DISABLED_BG, "text": DISABLED_TEXT, "border": DISABLED_BG},
            "outline": {"bg": CARD, "text": DISABLED_TEXT, "border": DISABLED_BG},
        },
        FOCUSED: {
            "standard": {"bg": DISABLED_BG, "text": DISABLED_TEXT, "border": DISABLED_BG},
            "primary": {"bg": DISABLED_BG, "text": DISABLED_TEXT, "border": DISABLED_BG},
            "outline": {"bg": CARD, "text": DISABLED_TEXT, "border": DISABLED_BG},
        },
    },
    ENABLED: {
        NOT_FOCUSED: {
            "standard": {"bg": CARD, "text": TEXT, "border": CARD_BORDER},
            "primary": {"bg": PRIMARY, "text": WHITE, "border": PRIMARY},
            "outline": {"bg": CARD, "text": PRIMARY, "border": PRIMARY},
        },
        FOCUSED: {
            "standard": {"bg": CARD, "text": TEXT, "border": PRIMARY},
            "primary": {"bg": PRIMARY_DARK, "text": WHITE, "border": PRIMARY_DARK},
            "outline": {"bg": CARD, "text": PRIMARY_DARK, "border": PRIMARY_DARK},
        },
    },
}

FONT_SIZE_MAP: dict[FontSize, dict[ComponentSize, int]] = {
    "standard": {"sm": 16, "md": 20, "lg": 24},
    "title": {"sm": 32, "md": 40, "lg": 48},
    "text": {"sm": 14, "md": 17, "lg": 20},
    "mono": {"sm": 13, "md": 15, "lg": 18},
}

FONT_NAMES: dict[FontSize, str] = {
    "standard": "Arial",
    "title": "Arial",
    "text": "Arial",
    "mono": "Courier New",
}
