"""
Configuration interface for the matching game.

Holds board geometry, card identities, timing and presentation settings,
and validates them before a game is dealt. Platform implementations
(desktop today) decide where the values come from.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


# Ocean animal theme (10 pairs for the default 4 x 5 board)
DEFAULT_IDENTITIES: Tuple[str, ...] = (
    "dolphin.png",
    "turtle.png",
    "clownfish.png",
    "shark.png",
    "octopus.png",
    "jellyfish.png",
    "seahorse.png",
    "crab.png",
    "stingray.png",
    "starfish.png",
)

DEFAULT_ROWS = 4
DEFAULT_COLUMNS = 5
DEFAULT_FLIP_BACK_DELAY_MS = 800


class ConfigurationError(Exception):
    """Raised when game settings cannot produce a valid deck."""
    pass


@dataclass
class BaseConfiguration(ABC):
    """
    Settings consumed by the game at construction.

    Subclasses provide a platform-specific way to load values, but the
    validation rules are shared.
    """
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    identities: Tuple[str, ...] = DEFAULT_IDENTITIES
    flip_back_delay_ms: int = DEFAULT_FLIP_BACK_DELAY_MS
    seed: Optional[int] = None

    # Presentation
    window_title: str = "Ocean Animals Matching Game"
    image_dir: Optional[Path] = None
    back_image: str = "card_back.png"
    cell_size: int = 100
    spacing: int = 10
    margin: int = 10
    log_level: str = "INFO"

    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    @property
    def board_size(self) -> int:
        """Total number of cards on the board."""
        return self.rows * self.columns

    @property
    def pair_count(self) -> int:
        """Number of pairs a valid board holds."""
        return self.board_size // 2

    def validate(self) -> "BaseConfiguration":
        """
        Check that these settings describe a playable board.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: If any setting is out of range
        """
        if self.rows <= 0 or self.columns <= 0:
            raise ConfigurationError(
                f"Board must have at least one row and column (got {self.rows}x{self.columns})"
            )

        if self.board_size % 2 != 0:
            raise ConfigurationError(
                f"Board size {self.rows}x{self.columns}={self.board_size} is odd; cards must pair up"
            )

        distinct = set(self.identities)
        if len(distinct) != len(self.identities):
            raise ConfigurationError("Card identities must be distinct")

        if len(distinct) * 2 != self.board_size:
            raise ConfigurationError(
                f"{len(distinct)} identities cannot fill a board of {self.board_size} cards "
                f"(need exactly {self.pair_count})"
            )

        if self.flip_back_delay_ms < 0:
            raise ConfigurationError(
                f"Flip-back delay must not be negative (got {self.flip_back_delay_ms} ms)"
            )

        if self.cell_size <= 0 or self.spacing < 0 or self.margin < 0:
            raise ConfigurationError("Cell size must be positive and spacing/margin non-negative")

        self._validated = True
        logger.debug("Configuration valid: %dx%d board, %d pairs", self.rows, self.columns, self.pair_count)
        return self

    @property
    def is_validated(self) -> bool:
        return self._validated

    @classmethod
    @abstractmethod
    def load(cls) -> "BaseConfiguration":
        """Load settings from the platform's configuration source."""
        raise NotImplementedError
