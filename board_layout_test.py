"""
Board and window sizing
"""
import pytest

from core.ui_logic.board_layout import BoardDimensions, BoardLayout


@pytest.fixture
def layout():
    return BoardLayout(BoardDimensions(rows=4, columns=5, cell_size=100, margin=10, spacing=10))


def test_board_size(layout):
    assert layout.dimensions.card_count == 20
    assert layout.dimensions.board_width == 10 * 2 + 5 * 100 + 4 * 10
    assert layout.dimensions.board_height == 10 * 2 + 4 * 100 + 3 * 10


def test_window_adds_header(layout):
    assert layout.window_size() == (560, 490)
    assert layout.window_size(header_height=0) == (560, 450)


def test_single_cell_board_has_no_spacing():
    layout = BoardLayout(BoardDimensions(rows=1, columns=1, cell_size=80, margin=5, spacing=30))
    assert layout.window_size(header_height=0) == (90, 90)
