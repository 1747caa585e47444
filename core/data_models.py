"""Core data structures for the matching game.

Contains the card and session models shared by the game logic and any
UI implementation.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, List, Optional, Tuple


class FaceState(Enum):
    """Which side of a card is showing."""
    HIDDEN = "hidden"
    REVEALED = "revealed"
    MATCHED = "matched"


class SessionMode(Enum):
    """Turn state of a game in progress."""
    IDLE = "idle"
    AWAITING_SECOND = "awaiting_second"
    RESOLVING = "resolving"
    TERMINAL = "terminal"


@dataclass
class Card:
    """A single board position and the identity dealt to it."""
    identity: Hashable
    index: int
    face: FaceState = FaceState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        return self.face is FaceState.HIDDEN

    @property
    def is_matched(self) -> bool:
        return self.face is FaceState.MATCHED


@dataclass
class GameSession:
    """Complete mutable state of one game."""
    deck: Tuple[Hashable, ...]
    cards: List[Card] = field(default_factory=list)
    pending_index: Optional[int] = None
    busy: bool = False
    remaining_pairs: int = 0
    mode: SessionMode = SessionMode.IDLE

    @classmethod
    def deal(cls, deck: Tuple[Hashable, ...]) -> "GameSession":
        """Create a fresh session with every card face down."""
        cards = [Card(identity=identity, index=i) for i, identity in enumerate(deck)]
        return cls(deck=tuple(deck), cards=cards, remaining_pairs=len(deck) // 2)

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def all_matched(self) -> bool:
        return all(card.is_matched for card in self.cards)

    def snapshot(self) -> Tuple[Tuple[FaceState, ...], Optional[int], bool, int, SessionMode]:
        """Immutable view of the mutable fields, for comparisons and debugging."""
        return (
            tuple(card.face for card in self.cards),
            self.pending_index,
            self.busy,
            self.remaining_pairs,
            self.mode,
        )
