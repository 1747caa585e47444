"""
Deck generation for the matching game.

Doubles a set of card identities and shuffles them into board order.
No UI framework dependencies.
"""
import logging
import random
from collections.abc import Set as AbstractSet
from typing import Hashable, Iterable, Optional, Tuple, Union

from config.base import ConfigurationError

logger = logging.getLogger(__name__)

RandomSource = Union[random.Random, int, None]


def _resolve_rng(rng: RandomSource) -> random.Random:
    if rng is None:
        return random.SystemRandom()
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


class DeckGenerator:
    """
    Builds shuffled decks where every identity appears exactly twice.

    The randomness source is fixed at construction so a seeded generator
    deals reproducible decks. Without one, decks come from the operating
    system's entropy pool.
    """

    def __init__(self, rng: RandomSource = None) -> None:
        """
        Args:
            rng: ``random.Random`` instance, integer seed, or None for a
                non-deterministic source
        """
        self._rng = _resolve_rng(rng)

    def generate(self, identities: Iterable[Hashable], board_size: int) -> Tuple[Hashable, ...]:
        """
        Deal a deck for a board of ``board_size`` cards.

        Args:
            identities: Distinct card identities, one per pair
            board_size: Number of cards on the board

        Returns:
            Tuple of identities in board order

        Raises:
            ConfigurationError: If the identities cannot fill the board exactly
        """
        if isinstance(identities, AbstractSet):
            # Sets have no stable order; sort so a seed always deals the same deck
            ordered = sorted(identities, key=repr)
        else:
            ordered = list(identities)

        if len(set(ordered)) != len(ordered):
            raise ConfigurationError("Card identities must be distinct")

        if board_size <= 0 or board_size % 2 != 0:
            raise ConfigurationError(f"Board size must be a positive even number (got {board_size})")

        if len(ordered) * 2 != board_size:
            raise ConfigurationError(
                f"Deck of {len(ordered) * 2} cards does not match board size {board_size}"
            )

        deck = [identity for identity in ordered for _ in range(2)]
        self._rng.shuffle(deck)

        logger.debug("Dealt %d cards (%d pairs)", len(deck), len(ordered))
        return tuple(deck)


def generate(identities: Iterable[Hashable], board_size: int, rng: RandomSource = None) -> Tuple[Hashable, ...]:
    """Deal a single deck; see ``DeckGenerator.generate``."""
    return DeckGenerator(rng).generate(identities, board_size)
