"""Ephemeral State Example - application entry point."""

from __future__ import annotations

import logging

import flet as ft
from statelab.ephemeral.ui.counter_widget import CounterWidget
from statelab.shared.core.configuration import get_config
from statelab.shared.ui.launcher import bootstrap, launch
from statelab.shared.ui.theme import TEXT_TITLE, apply_theme

logger = logging.getLogger(__name__)

APP_TITLE = "Ephemeral State Example"


def build_app(page: ft.Page) -> ft.View:
    """Build the single view: an AppBar and a centred CounterWidget."""
    counter = CounterWidget(page)
    return ft.View(
        route="/",
        appbar=ft.AppBar(title=ft.Text(APP_TITLE, color=TEXT_TITLE)),
        controls=[
            ft.Container(
                expand=True,
                alignment=ft.Alignment.CENTER,
                content=counter.build(),
            )
        ],
        padding=0,
    )


def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info(f"Initializing {APP_TITLE}...")
    ui = get_config().ui
    page.title = APP_TITLE
    apply_theme(page, seed_color=ui.primary_color, theme_mode=ui.theme_mode)

    page.views.append(build_app(page))
    page.update()
    logger.info("Application initialized successfully")


def run() -> None:
    config = bootstrap()
    launch(main, config)


if __name__ == "__main__":
    run()
