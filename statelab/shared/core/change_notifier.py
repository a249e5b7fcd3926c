"""Synchronous change notification.

A ``ChangeNotifier`` keeps a registry of zero-argument listeners keyed by
``SubscriptionToken``. Callers subscribe on mount and release the token on
teardown, either explicitly or with the ``subscription()`` context manager.
"""

from __future__ import annotations

import itertools
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, TypeAlias

Listener: TypeAlias = Callable[[], None]

_token_ids = itertools.count(1)


@dataclass(frozen=True)
class SubscriptionToken:
    """Handle returned by ``ChangeNotifier.subscribe``."""

    id: int


class ChangeNotifier:
    """Synchronous observable holding an unordered set of listeners."""

    def __init__(self) -> None:
        self._listeners: Dict[SubscriptionToken, Listener] = {}
        self._disposed = False
        self._logger = logging.getLogger(__name__)

    def _ensure_not_disposed(self) -> None:
        if self._disposed:
            raise RuntimeError(
                f"{type(self).__name__} was used after being disposed"
            )

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def subscribe(self, listener: Listener) -> SubscriptionToken:
        """Register a zero-argument callback and return its token."""
        self._ensure_not_disposed()
        token = SubscriptionToken(next(_token_ids))
        self._listeners[token] = listener
        self._logger.debug(
            f"Subscribed listener {token.id} to {type(self).__name__} "
            f"({len(self._listeners)} total)"
        )
        return token

    def unsubscribe(self, token: SubscriptionToken) -> bool:
        """Remove a listener. Returns False if the token was not registered."""
        if self._listeners.pop(token, None) is None:
            return False
        self._logger.debug(f"Unsubscribed listener {token.id} from {type(self).__name__}")
        return True

    @contextmanager
    def subscription(self, listener: Listener) -> Iterator[SubscriptionToken]:
        """Keep ``listener`` subscribed for the duration of a ``with`` block."""
        token = self.subscribe(listener)
        try:
            yield token
        finally:
            self.unsubscribe(token)

    def notify_listeners(self) -> None:
        """Call every registered listener once, in no particular order."""
        self._ensure_not_disposed()
        # Listeners added during the pass wait for the next one
        snapshot = list(self._listeners.items())
        self._logger.debug(
            f"Notifying {len(snapshot)} listener(s) of {type(self).__name__}"
        )
        for token, listener in snapshot:
            # Skip listeners released earlier in this pass
            if token not in self._listeners:
                continue
            self._safe_dispatch(token, listener)

    def _safe_dispatch(self, token: SubscriptionToken, listener: Listener) -> None:
        """Dispatch wrapper to keep one listener failure from stopping the pass."""
        listener_name = getattr(listener, "__name__", str(listener))
        try:
            listener()
        except Exception as exc:
            self._logger.exception(
                f"Listener error in '{listener_name}' (token {token.id})",
                exc_info=exc,
            )

    def dispose(self) -> None:
        """Release every listener. The notifier cannot be used afterwards."""
        self._listeners.clear()
        self._disposed = True
