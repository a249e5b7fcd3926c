"""Reactive state for the app-state demo.

Architecture:
- AppState: FletXr per-session shell state (status line, mirror visibility)
- Store: Service locator owning the single shared CounterModel
"""

from .app_state import AppState
from .store import Store

__all__ = ["AppState", "Store"]
