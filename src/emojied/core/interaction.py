# -*- coding: utf-8 -*-
"""
src/emojied/core/interaction.py

The interaction state machine: copy/export mode plus a short-lived
notification shown after each successful action.

States:
    mode          COPY <-> EXPORT, flipped only by the user.
    notification  None or Notification(message, expires_at).

A successful `activate()` sets a new notification and schedules its expiry.
Only one expiry timer is ever outstanding; a newer notification cancels the
previous timer before scheduling its own.
"""

import enum
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .dataset import GlyphRecord
from .rasterizer import Rasterizer
from .scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATION_MS = 1500

Clipboard = Callable[[str], bool]


class Mode(enum.Enum):
    COPY = "copy"
    EXPORT = "export"

    def toggled(self) -> "Mode":
        return Mode.EXPORT if self is Mode.COPY else Mode.COPY


@dataclass(frozen=True)
class Notification:
    message: str
    expires_at: float


@dataclass(frozen=True)
class InteractionState:
    mode: Mode = Mode.COPY
    notification: Optional[Notification] = None


StateListener = Callable[[InteractionState], None]


class InteractionController:
    """
    Applies user actions to an InteractionState.

    The clipboard and rasterizer are injected; both report failure by return
    value (False / None) and the controller never lets an exception from them
    escape `activate()`.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        rasterizer: Rasterizer,
        scheduler: Scheduler,
        notification_ms: int = DEFAULT_NOTIFICATION_MS,
    ):
        if notification_ms <= 0:
            raise ValueError(f"notification_ms must be positive, got {notification_ms}")
        self.clipboard = clipboard
        self.rasterizer = rasterizer
        self.scheduler = scheduler
        self.notification_ms = notification_ms
        self._state = InteractionState()
        self._expiry: Optional[TimerHandle] = None
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def notification(self) -> Optional[Notification]:
        return self._state.notification

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Registers a callback run with the new state after every change."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Transitions ---

    def toggle_mode(self) -> Mode:
        self._set_state(replace(self._state, mode=self._state.mode.toggled()))
        logger.info(f"Mode switched to {self._state.mode.value}.")
        return self._state.mode

    def set_mode(self, mode: Mode):
        if mode is not self._state.mode:
            self.toggle_mode()

    def activate(self, glyph: GlyphRecord) -> Optional[Notification]:
        """
        Copies or exports the glyph, depending on the current mode.

        Returns:
            The notification that is now showing, or None if the action failed.
        """
        if self._state.mode is Mode.COPY:
            message = self._copy(glyph.char)
        else:
            message = self._export(glyph.char)

        if message is None:
            return None
        return self._show(message)

    def dismiss_notification(self):
        """Hides the current notification before its timer runs out."""
        self._cancel_expiry()
        if self._state.notification is not None:
            self._set_state(replace(self._state, notification=None))

    # --- Internals ---

    def _copy(self, char: str) -> Optional[str]:
        try:
            copied = self.clipboard(char)
        except Exception as e:
            logger.error(f"Clipboard backend raised while copying {char!r}: {e}", exc_info=True)
            return None
        if not copied:
            logger.warning(f"Could not copy {char!r}; no notification shown.")
            return None
        return f"Copied {char} to clipboard!"

    def _export(self, char: str) -> Optional[str]:
        try:
            return self.rasterizer.render(char)
        except Exception as e:
            logger.error(f"Rasterizer raised while exporting {char!r}: {e}", exc_info=True)
            return None

    def _show(self, message: str) -> Notification:
        self._cancel_expiry()
        notification = Notification(
            message=message,
            expires_at=self.scheduler.now() + self.notification_ms,
        )
        self._set_state(replace(self._state, notification=notification))

        def expire():
            # A newer notification replaces this one and cancels this timer.
            if self._state.notification is notification:
                self._expiry = None
                self._set_state(replace(self._state, notification=None))

        self._expiry = self.scheduler.call_later(self.notification_ms, expire)
        return notification

    def _cancel_expiry(self):
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None

    def _set_state(self, state: InteractionState):
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.error(f"Error in interaction listener: {e}", exc_info=True)
