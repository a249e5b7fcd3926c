"""Process-exit cleanup registry."""

from __future__ import annotations

import atexit
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

# Global cleanup management
_cleanup_registered = False
_cleanup_handlers: List[Callable[[], None]] = []


def register_cleanup_handler(handler: Callable[[], None]) -> None:
    """Register a cleanup handler to be called on application exit."""
    global _cleanup_registered
    _cleanup_handlers.append(handler)
    if not _cleanup_registered:
        atexit.register(_cleanup_all)
        _cleanup_registered = True
        logger.debug("Registered atexit cleanup handler")


def _cleanup_all() -> None:
    """Clean up all registered handlers."""
    logger.info("Running application cleanup...")
    for handler in _cleanup_handlers:
        try:
            handler()
        except Exception as e:
            logger.warning(f"Error in cleanup handler: {e}")
    _cleanup_handlers.clear()
    logger.info("Application cleanup completed")


def clear_cleanup_handlers() -> None:
    """Drop registered handlers without running them."""
    _cleanup_handlers.clear()
