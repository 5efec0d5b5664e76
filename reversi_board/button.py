"""A rectangular clickable button with a centred label."""

from __future__ import annotations

from functools import lru_cache

import pygame

Color = tuple[int, ...]
Vector = tuple[float, float]

BLUE: Color = (0, 0, 255)
WHITE: Color = (255, 255, 255)


@lru_cache(maxsize=None)
def _load_font(path: str | None, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


class Button:
    """A filled rectangle with a text label; ``font`` is a font file path or None."""

    def __init__(self, font: str | None = None, text: str = "", character_size: int = 24) -> None:
        self.font = font
        self.text = text
        self.character_size = character_size
        self.position: Vector = (0.0, 0.0)
        self.size: Vector = (150.0, 50.0)
        self.background_color: Color = BLUE
        self.text_color: Color = WHITE
        self.label_center: Vector = (0.0, 0.0)

    def set_position(self, position: Vector) -> None:
        """Move the button and centre the label on its current size."""
        x, y = float(position[0]), float(position[1])
        self.position = (x, y)
        width, height = self.size
        self.label_center = (x + width / 2.0, y + height / 2.0)

    def set_size(self, size: Vector) -> None:
        self.size = (float(size[0]), float(size[1]))

    def set_text(self, text: str) -> None:
        self.text = text

    def contains(self, point: Vector) -> bool:
        """Whether ``point`` lies inside the background (right/bottom edges excluded)."""
        left, top = self.position
        width, height = self.size
        x, y = point
        return left <= x < left + width and top <= y < top + height

    def set_background_color(self, color: Color) -> None:
        self.background_color = tuple(color)

    def set_text_color(self, color: Color) -> None:
        self.text_color = tuple(color)

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the background and the label onto ``surface``."""
        left, top = self.position
        width, height = self.size
        rect = pygame.Rect(round(left), round(top), round(width), round(height))
        pygame.draw.rect(surface, self.background_color, rect)
        if self.text:
            rendered = _load_font(self.font, self.character_size).render(
                self.text, True, self.text_color
            )
            cx, cy = self.label_center
            surface.blit(rendered, rendered.get_rect(center=(round(cx), round(cy))))