import logging
from typing import Hashable, Optional

from PySide6.QtCore import QObject, Slot, Signal, Property

from config.base import BaseConfiguration
from core.deck import RandomSource
from core.ui_logic.board_layout import BoardDimensions, BoardLayout
from core.ui_logic.game_controller import GameController
from core.ui_logic.view_backend import UIBackend
from desktop_ui.qt_models.card_model import CardModel
from desktop_ui.qt_scheduler import QtScheduler

logger = logging.getLogger(__name__)


class QtUIBackend(UIBackend):
    """Applies game rendering instructions to the Qt card model."""

    def __init__(self, coordinator: "GameCoordinator") -> None:
        self._coordinator = coordinator

    def render_front(self, index: int, identity: Hashable) -> None:
        self._coordinator.card_model.show_front(index, identity)

    def render_back(self, index: int) -> None:
        self._coordinator.card_model.show_back(index)

    def disable(self, index: int) -> None:
        self._coordinator.card_model.set_enabled(index, False)

    def set_status_message(self, text: str) -> None:
        self._coordinator.set_status_message(text)


class GameCoordinator(QObject):
    """
    Connects the game controller to QML.

    Card clicks come in through the ``cardClicked`` slot; rendering
    instructions from the controller update the card model and the
    ``statusMessage`` property. Timers and clicks share the GUI thread.
    """

    statusMessageChanged = Signal()
    gameStateChanged = Signal()

    def __init__(self, config: BaseConfiguration, rng: RandomSource = None) -> None:
        super().__init__()
        self.config = config
        self._status_message = ""

        self.board_layout = BoardLayout(BoardDimensions(
            rows=config.rows,
            columns=config.columns,
            cell_size=config.cell_size,
            margin=config.margin,
            spacing=config.spacing
        ))
        self.card_model = CardModel(config.board_size, config.image_dir, config.back_image)
        self.ui_backend = QtUIBackend(self)
        self.scheduler = QtScheduler(self)

        logger.info("Creating GameCoordinator for %dx%d board", config.rows, config.columns)
        self.controller: Optional[GameController] = GameController.from_config(
            config, self.ui_backend, self.scheduler, rng=rng
        )
        self.controller.start()

    def set_status_message(self, text: str) -> None:
        if text == self._status_message:
            return
        self._status_message = text
        logger.debug("Status: %s", text)
        self.statusMessageChanged.emit()

    @Slot(int)
    def cardClicked(self, index: int) -> None:
        """Forward a click on the card at ``index`` to the game."""
        if not self.controller:
            logger.warning("Card %d clicked after shutdown", index)
            return
        was_finished = self.controller.is_finished
        remaining = self.controller.remaining_pairs
        self.controller.handle_selection(index)
        if self.controller.is_finished != was_finished or self.controller.remaining_pairs != remaining:
            self.gameStateChanged.emit()

    # Qt Properties for QML binding
    @Property(str, notify=statusMessageChanged)
    def statusMessage(self) -> str:
        """Current instructional text"""
        return self._status_message

    @Property(bool, notify=gameStateChanged)
    def finished(self) -> bool:
        """True once every pair is matched"""
        return bool(self.controller and self.controller.is_finished)

    @Property(int, notify=gameStateChanged)
    def remainingPairs(self) -> int:
        if not self.controller:
            return 0
        return self.controller.remaining_pairs

    @Property(str, constant=True)
    def windowTitle(self) -> str:
        return self.config.window_title

    @Property(int, constant=True)
    def boardRows(self) -> int:
        return self.board_layout.dimensions.rows

    @Property(int, constant=True)
    def boardColumns(self) -> int:
        return self.board_layout.dimensions.columns

    @Property(int, constant=True)
    def cellSize(self) -> int:
        return self.board_layout.dimensions.cell_size

    @Property(int, constant=True)
    def cellSpacing(self) -> int:
        return self.board_layout.dimensions.spacing

    @Property(int, constant=True)
    def boardMargin(self) -> int:
        return self.board_layout.dimensions.margin

    @Property(int, constant=True)
    def windowWidth(self) -> int:
        return self.board_layout.window_size()[0]

    @Property(int, constant=True)
    def windowHeight(self) -> int:
        return self.board_layout.window_size()[1]

    def cleanup(self) -> None:
        """Clean shutdown of coordinator"""
        logger.info("Cleaning up GameCoordinator")
        if self.controller:
            self.controller.shutdown()
            self.controller = None
        logger.info("Coordinator cleaned up")
