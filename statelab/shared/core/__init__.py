"""
Shared Core Module
==================

Change notification, configuration, logging and cleanup.
"""

from .change_notifier import ChangeNotifier, Listener, SubscriptionToken
from .service_registry import register_cleanup_handler, clear_cleanup_handlers
from .configuration import (
    ConfigManager,
    SystemConfig,
    UIConfig,
    CounterConfig,
    LoggingConfig,
    get_config_manager,
    get_config,
    ValidationLevel,
)
from .logging_config import configure_logging

__all__ = [
    # Change notification
    "ChangeNotifier",
    "Listener",
    "SubscriptionToken",
    # Cleanup
    "register_cleanup_handler",
    "clear_cleanup_handlers",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "UIConfig",
    "CounterConfig",
    "LoggingConfig",
    "get_config_manager",
    "get_config",
    "ValidationLevel",
    # Logging
    "configure_logging",
]
