"""Counter widget that owns its value.

Nothing outside the widget can read or change the counter. Building a new
``CounterWidget`` starts again from zero.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import flet as ft

from statelab.shared.ui.theme import BUTTON_INCREMENT, TEXT_COUNTER

logger = logging.getLogger(__name__)


class CounterWidget:
    """A counter label plus an increment button, with private state."""

    def __init__(self, page: ft.Page):
        self.page = page
        self._counter = 0
        self._text: Optional[ft.Text] = None
        self._column: Optional[ft.Column] = None

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def label(self) -> str:
        return f"Counter Value: {self._counter}"

    def build(self) -> ft.Control:
        self._text = ft.Text(self.label, size=20, color=TEXT_COUNTER)
        self._column = ft.Column(
            [
                self._text,
                ft.Container(height=10),
                ft.ElevatedButton(
                    "Increment",
                    color=BUTTON_INCREMENT,
                    on_click=self._on_increment_click,
                ),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        )
        return self._column

    def increment(self) -> None:
        def _bump() -> None:
            self._counter += 1

        self.set_state(_bump)

    def set_state(self, fn: Callable[[], None]) -> None:
        """Apply ``fn`` to the widget's state, then redraw this widget's subtree."""
        fn()
        logger.debug(f"CounterWidget state changed: counter={self._counter}")
        if self._text is None:
            # Not built yet; the next build picks up the new value
            return
        self._text.value = self.label
        try:
            self._column.update()
        except RuntimeError:
            # Not on a page, or session destroyed
            pass

    def _on_increment_click(self, e: Optional[ft.ControlEvent] = None) -> None:
        self.increment()
