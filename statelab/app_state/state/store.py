"""Global State Store - Service Locator Pattern.

Provides centralized access to the shared counter model from any UI
component, in any page session.
"""

from __future__ import annotations

from typing import Optional

from statelab.shared.core.configuration import CounterConfig
from statelab.shared.domain.counter import CounterModel


class Store:
    """Global state store for the app-state demo.

    Holds the single ``CounterModel`` created at startup. Every display
    component reads the same instance through ``Store.get()``. Per-session
    shell state (``AppState``) is built by each shell, not stored here.

    Usage:
        # During app initialization
        Store.initialize(config.counter)

        # In any UI component
        store = Store.get()
        store.counter.increment()
    """

    _instance: Optional['Store'] = None

    def __init__(self, counter_config: CounterConfig) -> None:
        """Initialize store.

        Note: Do not call directly. Use Store.initialize() instead.

        Args:
            counter_config: Counter section of the system configuration
        """
        self.counter = CounterModel(clamp_at_zero=counter_config.clamp_at_zero)

    @classmethod
    def initialize(cls, counter_config: Optional[CounterConfig] = None) -> 'Store':
        """Initialize the global store instance.

        Should be called once during application startup before any UI
        components are created.

        Args:
            counter_config: Counter configuration, defaults when omitted

        Returns:
            The initialized store instance

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(counter_config or CounterConfig())
        return cls._instance

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    def dispose(self) -> None:
        """Release every counter listener."""
        self.counter.dispose()

    @classmethod
    def reset(cls) -> None:
        """Dispose and drop the store instance.

        Primarily used for testing. In production, store persists for
        application lifetime.
        """
        if cls._instance is not None:
            cls._instance.dispose()
        cls._instance = None
