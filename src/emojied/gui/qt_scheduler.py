# -*- coding: utf-8 -*-
"""
src/emojied/gui/qt_scheduler.py

Qt implementation of the core Scheduler, built on single-shot QTimers so that
timer callbacks run on the GUI thread between other events.
"""

import time
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer

from ..core.scheduler import Scheduler, TimerHandle


class QtTimerHandle(TimerHandle):
    """Wraps one single-shot QTimer."""

    def __init__(self, delay_ms: int, callback: Callable[[], None], parent: Optional[QObject] = None):
        self._callback = callback
        self._timer: Optional[QTimer] = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._timer.start(max(0, int(delay_ms)))

    def _fire(self):
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.deleteLater()
        self._callback()

    def cancel(self):
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None

    @property
    def active(self) -> bool:
        return self._timer is not None


class QtScheduler(Scheduler):
    """Schedules callbacks on the Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None):
        self.parent = parent

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        return QtTimerHandle(delay_ms, callback, self.parent)
