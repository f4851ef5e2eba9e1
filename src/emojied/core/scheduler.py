# -*- coding: utf-8 -*-
"""
src/emojied/core/scheduler.py

A minimal single-shot timer abstraction.

The interaction controller only needs two things from its host: the current
time and a way to run a callback once after a delay, with the option of
cancelling it. The GUI provides a Qt-backed implementation
(`emojied.gui.qt_scheduler.QtScheduler`); tests drive a manual clock.
"""

from abc import ABC, abstractmethod
from typing import Callable


class TimerHandle(ABC):
    """A pending single-shot callback."""

    @abstractmethod
    def cancel(self):
        """Prevents the callback from firing. Safe to call more than once."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True while the callback is still due to fire."""


class Scheduler(ABC):
    """Clock plus single-shot timers, all on the caller's thread."""

    @abstractmethod
    def now(self) -> float:
        """Current time in milliseconds on a monotonic clock."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Runs `callback` once, `delay_ms` milliseconds from now."""
