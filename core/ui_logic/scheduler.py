"""
One-shot deferred actions.

The game logic schedules the flip-back of mismatched cards through this
interface. Implementations must run the action on the same thread or
event queue that delivers card clicks.
"""
from abc import ABC, abstractmethod
from typing import Callable

Action = Callable[[], None]


class ScheduledTask(ABC):
    """Handle to an action scheduled to run once."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the action from running if it has not run yet."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True while the action is still waiting to run."""


class Scheduler(ABC):
    """Runs actions once after a delay."""

    @abstractmethod
    def schedule(self, delay_ms: int, action: Action) -> ScheduledTask:
        """
        Run ``action`` once after ``delay_ms`` milliseconds.

        Args:
            delay_ms: Delay before the action runs
            action: Zero-argument callable

        Returns:
            Handle that can cancel the pending action
        """
