"""Display component subscribed to the shared counter model."""

from __future__ import annotations

import logging
from typing import Optional

import flet as ft

from statelab.shared.core.change_notifier import SubscriptionToken
from statelab.shared.domain.counter import CounterModel
from statelab.shared.ui.theme import CARD_BORDER, TEXT_COUNTER, TEXT_LABEL

logger = logging.getLogger(__name__)


class CounterDisplay:
    """Read-only view of a ``CounterModel``.

    ``mount`` subscribes and builds the control; ``dispose`` unsubscribes.
    The display holds no state of its own beyond the value it last rendered.

    Usage:
        with CounterDisplay(model, page, "Primary") as display:
            container.content = display.mount()
    """

    def __init__(self, model: CounterModel, page: ft.Page, label: str = "Counter"):
        self.model = model
        self.page = page
        self.label = label
        self._token: Optional[SubscriptionToken] = None
        self._text: Optional[ft.Text] = None
        self._container: Optional[ft.Container] = None
        self._displayed_value: Optional[int] = None

    @property
    def mounted(self) -> bool:
        return self._token is not None

    @property
    def displayed_value(self) -> Optional[int]:
        """Value shown by the last render, ``None`` before mounting."""
        return self._displayed_value

    def mount(self) -> ft.Control:
        """Subscribe to the model and build the control tree."""
        if self._token is None:
            self._token = self.model.subscribe(self._on_model_changed)
            logger.debug(f"CounterDisplay '{self.label}' mounted")

        self._displayed_value = self.model.value
        self._text = ft.Text(self._render_text(), size=20, color=TEXT_COUNTER)
        self._container = ft.Container(
            padding=12,
            border_radius=8,
            border=ft.Border.all(1, CARD_BORDER),
            content=ft.Column(
                [
                    ft.Text(self.label, size=12, color=TEXT_LABEL),
                    self._text,
                ],
                spacing=4,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )
        return self._container

    def dispose(self) -> None:
        """Unsubscribe from the model. Safe to call more than once."""
        if self._token is None:
            return
        self.model.unsubscribe(self._token)
        self._token = None
        logger.debug(f"CounterDisplay '{self.label}' disposed")

    def __enter__(self) -> "CounterDisplay":
        return self

    def __exit__(self, *args) -> None:
        self.dispose()

    def _render_text(self) -> str:
        return f"Counter Value: {self._displayed_value}"

    def _on_model_changed(self) -> None:
        self._displayed_value = self.model.value
        if self._text is None:
            return
        self._text.value = self._render_text()
        # Redraw this display only
        try:
            self._container.update()
        except RuntimeError:
            # Not on a page, or session destroyed
            pass
