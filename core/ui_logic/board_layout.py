"""
Board dimensions for the card grid.

Derives the board and window size from rows, columns, cell size and
spacing. No UI framework dependencies.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class BoardDimensions:
    """Board layout dimensions and spacing."""
    rows: int = 4
    columns: int = 5
    cell_size: int = 100
    margin: int = 10
    spacing: int = 10

    @property
    def card_count(self) -> int:
        return self.rows * self.columns

    @property
    def board_width(self) -> int:
        """Total width required for the board."""
        return (self.margin * 2) + (self.columns * self.cell_size) + ((self.columns - 1) * self.spacing)

    @property
    def board_height(self) -> int:
        """Total height required for the board."""
        return (self.margin * 2) + (self.rows * self.cell_size) + ((self.rows - 1) * self.spacing)


class BoardLayout:
    """Sizes the window around a rows x columns board."""

    def __init__(self, dimensions: BoardDimensions) -> None:
        self.dimensions = dimensions

    def window_size(self, header_height: int = 40) -> Tuple[int, int]:
        """
        Window size that fits the board plus the status line.

        Args:
            header_height: Height reserved for the instructions text

        Returns:
            Tuple of (width, height)
        """
        return (self.dimensions.board_width, self.dimensions.board_height + header_height)
