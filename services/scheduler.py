# -*- coding: utf-8 -*-
"""
Cancellable single-shot scheduling.

The wizard controller never touches QTimer directly; it asks a Scheduler for
a ScheduledTask and keeps the handle so the task can be cancelled on close
or teardown.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from PyQt5.QtCore import QObject, QTimer

from utils.logger import get_logger

logger = get_logger(__name__)


class ScheduledTask(ABC):
    """Handle to a callback scheduled for later execution."""

    @abstractmethod
    def cancel(self):
        """Prevent the callback from running. Safe to call more than once."""
        pass

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True while the callback is still pending."""
        pass


class Scheduler(ABC):
    """Schedules callbacks after a delay."""

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        pass


class QtScheduledTask(ScheduledTask):
    """ScheduledTask backed by a single-shot QTimer."""

    def __init__(self, timer: QTimer, callback: Callable[[], None]):
        self._timer = timer
        self._callback = callback
        self._done = False
        self._timer.timeout.connect(self._fire)

    def _fire(self):
        if self._done:
            return
        self._done = True
        self._release()
        self._callback()

    def cancel(self):
        if self._done:
            return
        self._done = True
        self._timer.stop()
        self._release()

    def _release(self):
        self._timer.timeout.disconnect(self._fire)
        self._timer.deleteLater()

    @property
    def is_active(self) -> bool:
        return not self._done


class QtScheduler(Scheduler):
    """Scheduler running callbacks on the Qt event loop of its owner thread."""

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        task = QtScheduledTask(timer, callback)
        timer.start(max(0, int(delay_ms)))
        logger.debug(f"Scheduled callback in {delay_ms} ms")
        return task
