"""Shared counter model.

A single ``CounterModel`` lives for the whole app-state demo. Display
components subscribe to it and re-render on every notification.
"""

from __future__ import annotations

import logging

from statelab.shared.core.change_notifier import ChangeNotifier

logger = logging.getLogger(__name__)


class CounterModel(ChangeNotifier):
    """Observable integer counter.

    Every mutating call notifies all current listeners exactly once, even
    when ``clamp_at_zero`` keeps the value from changing.

    Args:
        clamp_at_zero: Stop ``decrement`` at 0 instead of going negative.
    """

    def __init__(self, clamp_at_zero: bool = False) -> None:
        super().__init__()
        self._value = 0
        self.clamp_at_zero = clamp_at_zero

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> None:
        self._value += 1
        logger.debug(f"Counter incremented to {self._value}")
        self.notify_listeners()

    def decrement(self) -> None:
        if self.clamp_at_zero and self._value <= 0:
            logger.debug("Counter decrement clamped at 0")
        else:
            self._value -= 1
            logger.debug(f"Counter decremented to {self._value}")
        self.notify_listeners()

    def __repr__(self) -> str:
        return f"CounterModel(value={self._value!r}, listeners={self.listener_count})"
