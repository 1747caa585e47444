"""
Shared test helpers: a recording view, a hand-cranked scheduler and a Qt
application for the desktop tests.
"""
import sys
import time
from typing import Callable, Hashable, List, Optional, Tuple

import pytest

from core.ui_logic.scheduler import Action, ScheduledTask, Scheduler
from core.ui_logic.view_backend import UIBackend


class FakeView(UIBackend):
    """Records every rendering instruction in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple] = []
        self.messages: List[str] = []

    def render_front(self, index: int, identity: Hashable) -> None:
        self.calls.append(("front", index, identity))

    def render_back(self, index: int) -> None:
        self.calls.append(("back", index))

    def disable(self, index: int) -> None:
        self.calls.append(("disable", index))

    def set_status_message(self, text: str) -> None:
        self.calls.append(("message", text))
        self.messages.append(text)

    @property
    def last_message(self) -> Optional[str]:
        return self.messages[-1] if self.messages else None

    def clear(self) -> None:
        self.calls.clear()
        self.messages.clear()


class ManualTask(ScheduledTask):
    def __init__(self, delay_ms: int, action: Action) -> None:
        self.delay_ms = delay_ms
        self.action = action
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def fire(self) -> None:
        if self.active:
            self.fired = True
            self.action()


class ManualScheduler(Scheduler):
    """Keeps scheduled actions until a test fires them."""

    def __init__(self) -> None:
        self.tasks: List[ManualTask] = []

    def schedule(self, delay_ms: int, action: Action) -> ScheduledTask:
        task = ManualTask(delay_ms, action)
        self.tasks.append(task)
        return task

    @property
    def pending(self) -> List[ManualTask]:
        return [task for task in self.tasks if task.active]

    def run_pending(self) -> int:
        """Fire every outstanding task; returns how many ran."""
        due = self.pending
        for task in due:
            task.fire()
        return len(due)


@pytest.fixture
def view() -> FakeView:
    return FakeView()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(scope="session")
def qt_app():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv[:1])
    return app


def process_events_until(app, predicate: Callable[[], bool], timeout_ms: int = 2000) -> bool:
    """Spin the Qt event loop until ``predicate`` holds or time runs out."""
    from PySide6.QtCore import QEventLoop

    deadline = time.monotonic() + timeout_ms / 1000
    while not predicate():
        if time.monotonic() > deadline:
            return False
        app.processEvents(QEventLoop.ProcessEventsFlag.AllEvents, 20)
        time.sleep(0.002)
    return True
