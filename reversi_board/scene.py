"""Base class for the screens the game switches between."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame


class Scene(ABC):
    """A screen that reacts to events, advances in time and draws itself."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""

    @abstractmethod
    def update(self, delta: float) -> "Scene | None":
        """Advance by ``delta`` seconds; return the next scene or None to stay."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the scene onto ``surface``."""