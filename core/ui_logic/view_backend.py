"""
Outbound interface from the game logic to a view layer.

Each method is a rendering instruction with no return value. Qt desktop
and any future display implement the same four calls.
"""
from abc import ABC, abstractmethod
from typing import Hashable


class UIBackend(ABC):
    """Abstract view that the game controller drives."""

    @abstractmethod
    def render_front(self, index: int, identity: Hashable) -> None:
        """Show the face for this card's identity."""

    @abstractmethod
    def render_back(self, index: int) -> None:
        """Show the hidden back of the card."""

    @abstractmethod
    def disable(self, index: int) -> None:
        """Make the card permanently non-interactive."""

    @abstractmethod
    def set_status_message(self, text: str) -> None:
        """Replace the instructional text shown to the player."""
