"""
QTimer-backed scheduler.

Actions run on the thread that owns the timer, which is the GUI thread
for the desktop app, so they never overlap with click handling.
"""
import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer

from core.ui_logic.scheduler import Action, ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


class QtScheduledTask(ScheduledTask):
    """Single-shot QTimer wrapper."""

    def __init__(self, timer: QTimer, action: Action) -> None:
        self._timer = timer
        self._action = action
        self._done = False
        timer.timeout.connect(self._fire)

    def _release(self) -> None:
        # Parented timers would otherwise live as long as their parent
        if self._timer.parent() is not None:
            self._timer.deleteLater()

    def _fire(self) -> None:
        if self._done:
            return
        self._done = True
        self._release()
        try:
            self._action()
        except Exception as exc:
            logger.exception("Scheduled action failed: %s", exc)

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.stop()
        self._release()

    @property
    def active(self) -> bool:
        return not self._done


class QtScheduler(Scheduler):
    """Schedules actions on the Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, action: Action) -> ScheduledTask:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        task = QtScheduledTask(timer, action)
        timer.start()
        logger.debug("Scheduled action in %d ms", delay_ms)
        return task
