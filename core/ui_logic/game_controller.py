"""
Turn state machine for the matching game.

Owns the game session, reacts to card selections and to the deferred
flip-back of mismatched pairs, and tells a UIBackend what to draw.
No UI framework dependencies.
"""
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Optional, Sequence

from config.base import BaseConfiguration, ConfigurationError
from ..data_models import Card, FaceState, GameSession, SessionMode
from ..deck import DeckGenerator, RandomSource
from .scheduler import ScheduledTask, Scheduler
from .view_backend import UIBackend

logger = logging.getLogger(__name__)


class ContractViolation(IndexError):
    """Raised when the view asks for a card that is not on the board."""
    pass


@dataclass(frozen=True)
class GameMessages:
    """Status texts shown to the player."""
    welcome: str = "Welcome! Click two cards to find a matching pair."
    select_another: str = "Now select another card."
    progress: str = "Nice match! Pairs left: {remaining}."
    not_a_match: str = "Not a match. Cards will flip back."
    try_again: str = "Try again! Find all the matching ocean animals."
    complete: str = "Congratulations! You matched all the ocean animals! 🌊"


class GameController:
    """
    Runs one game from deal to the last match.

    Clicks arrive through ``handle_selection``. A matching pair resolves
    immediately; a mismatch puts the session in RESOLVING and schedules a
    single flip-back, during which every click is ignored. Rendering goes
    out through the UIBackend as individual instructions.
    """

    def __init__(
        self,
        deck: Sequence[Hashable],
        view: UIBackend,
        scheduler: Scheduler,
        flip_back_delay_ms: int = 800,
        messages: Optional[GameMessages] = None,
    ) -> None:
        """
        Args:
            deck: Identities in board order, each appearing exactly twice
            view: Receives rendering instructions
            scheduler: Runs the flip-back after a mismatch
            flip_back_delay_ms: How long a mismatched pair stays face up
            messages: Status texts, defaults to the ocean animal theme

        Raises:
            ConfigurationError: If the deck does not hold exactly two of each identity
        """
        self.view = view
        self.scheduler = scheduler
        self.flip_back_delay_ms = flip_back_delay_ms
        self.messages = messages or GameMessages()
        deck = tuple(deck)
        self._check_deck(deck)
        self._session = GameSession.deal(deck)
        self._flip_back_task: Optional[ScheduledTask] = None

        logger.info("New game: %d cards, %d pairs", self._session.size, self._session.remaining_pairs)

    @classmethod
    def from_config(
        cls,
        config: BaseConfiguration,
        view: UIBackend,
        scheduler: Scheduler,
        rng: RandomSource = None,
        messages: Optional[GameMessages] = None,
    ) -> "GameController":
        """
        Validate ``config``, deal a deck and build a controller for it.

        Raises:
            ConfigurationError: If the board cannot be dealt
        """
        config.validate()
        generator = DeckGenerator(rng if rng is not None else config.seed)
        deck = generator.generate(config.identities, config.board_size)
        return cls(deck, view, scheduler, config.flip_back_delay_ms, messages)

    @staticmethod
    def _check_deck(deck: tuple) -> None:
        if not deck or len(deck) % 2 != 0:
            raise ConfigurationError(f"Deck must hold a positive even number of cards (got {len(deck)})")

        odd = sorted(repr(identity) for identity, count in Counter(deck).items() if count != 2)
        if odd:
            raise ConfigurationError(f"Every identity must appear exactly twice; not so for {', '.join(odd)}")

    # ------------------------------------------------------------------
    def start(self) -> None:
        """Draw the initial face-down board and the welcome text."""
        for card in self._session.cards:
            self.view.render_back(card.index)
        self.view.set_status_message(self.messages.welcome)

    def handle_selection(self, index: int) -> None:
        """
        Process a click on the card at ``index``.

        Clicks while a mismatch is resolving, on matched cards, or on the
        pending first pick are ignored.

        Raises:
            ContractViolation: If index is not a card on the board
        """
        session = self._session
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < session.size:
            raise ContractViolation(f"Card index {index!r} outside board of {session.size} cards")

        card = session.cards[index]

        if session.mode is SessionMode.RESOLVING:
            logger.debug("Ignoring click on %d while resolving a mismatch", index)
            return
        if card.is_matched:
            logger.debug("Ignoring click on matched card %d", index)
            return
        if index == session.pending_index:
            logger.debug("Ignoring second click on pending card %d", index)
            return

        self._reveal(card)

        if session.mode is SessionMode.IDLE:
            session.pending_index = index
            session.mode = SessionMode.AWAITING_SECOND
            self.view.set_status_message(self.messages.select_another)
            return

        first = session.cards[session.pending_index]
        if first.identity == card.identity:
            self._handle_match(first, card)
        else:
            self._handle_mismatch(first, card)

    # ------------------------------------------------------------------
    def _reveal(self, card: Card) -> None:
        card.face = FaceState.REVEALED
        self.view.render_front(card.index, card.identity)
        logger.debug("Revealed card %d (%s)", card.index, card.identity)

    def _handle_match(self, first: Card, second: Card) -> None:
        session = self._session
        for card in (first, second):
            card.face = FaceState.MATCHED
            self.view.disable(card.index)

        session.pending_index = None
        session.remaining_pairs -= 1
        logger.info("Matched %s at %d/%d, %d pairs left",
                    first.identity, first.index, second.index, session.remaining_pairs)

        if session.remaining_pairs == 0:
            session.mode = SessionMode.TERMINAL
            logger.info("All pairs matched")
            self.view.set_status_message(self.messages.complete)
        else:
            session.mode = SessionMode.IDLE
            self.view.set_status_message(self.messages.progress.format(remaining=session.remaining_pairs))

    def _handle_mismatch(self, first: Card, second: Card) -> None:
        session = self._session
        session.busy = True
        session.mode = SessionMode.RESOLVING
        self.view.set_status_message(self.messages.not_a_match)
        logger.info("No match at %d/%d, flipping back in %d ms",
                    first.index, second.index, self.flip_back_delay_ms)

        def flip_back() -> None:
            self._flip_back(session, first.index, second.index)

        self._flip_back_task = self.scheduler.schedule(self.flip_back_delay_ms, flip_back)

    def _flip_back(self, session: GameSession, first_index: int, second_index: int) -> None:
        if session is not self._session or session.mode is not SessionMode.RESOLVING:
            logger.warning("Discarding stale flip-back for %d/%d", first_index, second_index)
            return

        for index in (first_index, second_index):
            session.cards[index].face = FaceState.HIDDEN
            self.view.render_back(index)

        session.pending_index = None
        session.busy = False
        session.mode = SessionMode.IDLE
        self._flip_back_task = None
        self.view.set_status_message(self.messages.try_again)
        logger.debug("Flipped back %d/%d", first_index, second_index)

    def shutdown(self) -> None:
        """Cancel an outstanding flip-back, if any."""
        if self._flip_back_task is not None and self._flip_back_task.active:
            logger.debug("Cancelling pending flip-back")
            self._flip_back_task.cancel()
        self._flip_back_task = None

    # ------------------------------------------------------------------
    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def mode(self) -> SessionMode:
        return self._session.mode

    @property
    def remaining_pairs(self) -> int:
        return self._session.remaining_pairs

    @property
    def pending_index(self) -> Optional[int]:
        return self._session.pending_index

    @property
    def is_busy(self) -> bool:
        return self._session.busy

    @property
    def is_finished(self) -> bool:
        return self._session.mode is SessionMode.TERMINAL

    @property
    def board_size(self) -> int:
        return self._session.size

    def card(self, index: int) -> Card:
        return self._session.cards[index]
