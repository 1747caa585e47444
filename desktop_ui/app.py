import logging
import os
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QGuiApplication
from PySide6.QtQml import QQmlApplicationEngine

from config.base import ConfigurationError
from config.desktop import DesktopConfiguration
from desktop_ui.coordinator import GameCoordinator

logger = logging.getLogger(__name__)


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def configure_logging(level: str) -> None:
    # Configure default console logging if not already configured
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=_level_number(level),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def main(argv: Optional[list[str]] = None) -> int:
    try:
        config = DesktopConfiguration.load()
    except ConfigurationError as e:
        configure_logging("INFO")
        logger.error("Invalid game configuration: %s", e)
        return 1

    configure_logging(config.log_level)

    # Set Qt Quick Controls style to Basic to allow background customization
    os.environ["QT_QUICK_CONTROLS_STYLE"] = "Basic"

    app = QGuiApplication(argv if argv is not None else sys.argv)
    coordinator = GameCoordinator(config)

    engine = QQmlApplicationEngine()
    engine.rootContext().setContextProperty("cardModel", coordinator.card_model)
    engine.rootContext().setContextProperty("game", coordinator)

    qml_file = Path(__file__).parent / "qml" / "MainWindow.qml"
    engine.load(qml_file)

    if not engine.rootObjects():
        logger.error("Failed to load QML from %s", qml_file)
        coordinator.cleanup()
        return 1

    try:
        return app.exec()
    finally:
        coordinator.cleanup()
