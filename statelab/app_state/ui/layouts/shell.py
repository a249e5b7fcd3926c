from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

import flet as ft

from statelab.app_state.state import AppState, Store
from statelab.app_state.ui.counter_display import CounterDisplay
from statelab.shared.ui.theme import (
    BUTTON_DECREMENT,
    BUTTON_INCREMENT,
    TEXT_LABEL,
    TEXT_PLACEHOLDER,
    TEXT_TITLE,
)

logger = logging.getLogger(__name__)

APP_TITLE = "App State Example"


def build_shell(
    page: ft.Page,
    store: Store,
    app: Optional[AppState] = None,
) -> Tuple[ft.View, Callable[[], None]]:
    """Build one session's view around the store's shared counter.

    ``app`` is this session's shell state; a fresh one is created when omitted.

    Returns the view and a teardown callable that releases every
    subscription this session holds on the shared model. Teardown is safe to
    call more than once.
    """
    model = store.counter

    # Shell state is per session; only the counter is shared
    if app is None:
        app = AppState(model)
    app.initialize()

    # Both displays read the same model; neither keeps its own count
    primary_display = CounterDisplay(model, page, "Primary display")
    mirror_displays: List[CounterDisplay] = []  # Mutable for closure
    torn_down = [False]

    mirror_container = ft.Container()

    def _mount_mirror() -> None:
        display = CounterDisplay(model, page, "Mirror display")
        mirror_displays.append(display)
        mirror_container.content = display.mount()

    def _unmount_mirror() -> None:
        while mirror_displays:
            mirror_displays.pop().dispose()
        mirror_container.content = ft.Text(
            "Mirror display unmounted", color=TEXT_PLACEHOLDER, italic=True
        )

    def _safe_update() -> None:
        if torn_down[0]:
            return
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    status_text = ft.Text(app.status_text.value, color=TEXT_LABEL, size=12)
    mirror_button = ft.TextButton(on_click=lambda e: app.toggle_mirror())

    def _sync_status() -> None:
        status_text.value = app.status_text.value
        _safe_update()

    def _sync_mirror() -> None:
        if torn_down[0]:
            return
        visible = app.mirror_visible.value
        if visible and not mirror_displays:
            _mount_mirror()
        elif not visible and mirror_displays:
            _unmount_mirror()
        mirror_button.content = "Unmount mirror" if visible else "Mount mirror"
        _safe_update()

    # --- Listener Bindings ---
    app.status_text.listen(_sync_status)
    app.mirror_visible.listen(_sync_mirror)

    controls = ft.Row(
        [
            ft.IconButton(
                ft.Icons.REMOVE,
                icon_color=BUTTON_DECREMENT,
                tooltip="Decrement",
                on_click=lambda e: model.decrement(),
            ),
            ft.IconButton(
                ft.Icons.ADD,
                icon_color=BUTTON_INCREMENT,
                tooltip="Increment",
                on_click=lambda e: model.increment(),
            ),
        ],
        alignment=ft.MainAxisAlignment.CENTER,
    )

    body = ft.Container(
        expand=True,
        alignment=ft.Alignment.CENTER,
        content=ft.Column(
            [
                primary_display.mount(),
                mirror_container,
                controls,
                mirror_button,
                status_text,
            ],
            spacing=16,
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )

    # Initial Sync
    _sync_mirror()

    def teardown() -> None:
        if torn_down[0]:
            return
        torn_down[0] = True
        primary_display.dispose()
        while mirror_displays:
            mirror_displays.pop().dispose()
        app.shutdown()
        logger.info("App state shell torn down")

    view = ft.View(
        route="/",
        appbar=ft.AppBar(title=ft.Text(APP_TITLE, color=TEXT_TITLE)),
        controls=[body],
        padding=0,
    )
    return view, teardown
