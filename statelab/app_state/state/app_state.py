"""Application Shell State Management.

Reactive shell state built on FletXr primitives. The counter itself lives in
``CounterModel``; this class only mirrors what one page session's chrome shows
about it. Each session builds its own ``AppState``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fletx.core import RxBool, RxStr

from statelab.shared.core.change_notifier import SubscriptionToken
from statelab.shared.domain.counter import CounterModel

logger = logging.getLogger(__name__)


class AppState:
    """Reactive State for one Application Shell session.

    Subscribes to the shared counter model and keeps a human readable status
    line in sync with it. Also tracks whether this session's mirror display
    is mounted.
    """

    def __init__(self, counter: CounterModel) -> None:
        """Initialize application state.

        Args:
            counter: The shared counter model
        """
        self.counter = counter

        # Status bar
        self.status_text: RxStr = RxStr("Ready")

        # Whether the second (mirror) display is mounted
        self.mirror_visible: RxBool = RxBool(True)

        self._token: Optional[SubscriptionToken] = None
        self._notifications = 0

    @property
    def started(self) -> bool:
        return self._token is not None

    @property
    def notification_count(self) -> int:
        return self._notifications

    def initialize(self) -> None:
        """Subscribe to the counter model. Safe to call more than once."""
        if self._token is not None:
            return
        self._token = self.counter.subscribe(self._handle_counter_changed)
        logger.info("AppState subscribed to counter model")

    def shutdown(self) -> None:
        """Release the counter subscription."""
        if self._token is None:
            return
        self.counter.unsubscribe(self._token)
        self._token = None
        logger.info("AppState unsubscribed from counter model")

    # --- Public Actions ---

    def toggle_mirror(self) -> None:
        """Mount or unmount the mirror display."""
        self.mirror_visible.value = not self.mirror_visible.value

    # --- Listeners ---

    def _handle_counter_changed(self) -> None:
        self._notifications += 1
        self.status_text.value = (
            f"Counter changed to {self.counter.value} "
            f"({self.counter.listener_count} subscriber(s) notified)"
        )
