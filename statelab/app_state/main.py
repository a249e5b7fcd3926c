"""App State Example - application entry point."""

from __future__ import annotations

import logging

import flet as ft
from statelab.app_state.state import Store
from statelab.app_state.ui.layouts.shell import APP_TITLE, build_shell
from statelab.shared.core.configuration import get_config
from statelab.shared.core.service_registry import register_cleanup_handler
from statelab.shared.ui.launcher import bootstrap, launch
from statelab.shared.ui.theme import apply_theme

logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info(f"Initializing {APP_TITLE}...")
    config = get_config()
    page.title = APP_TITLE
    apply_theme(page, seed_color=config.ui.primary_color, theme_mode=config.ui.theme_mode)

    # One shared model for the lifetime of the process
    if Store.is_initialized():
        store = Store.get()
    else:
        store = Store.initialize(config.counter)
        register_cleanup_handler(Store.reset)

    view, teardown = build_shell(page, store)
    # Release this session's subscriptions when the session ends
    page.on_close = lambda e: teardown()
    page.views.append(view)
    page.update()
    logger.info("Application initialized successfully")


def run() -> None:
    config = bootstrap()
    launch(main, config)


if __name__ == "__main__":
    run()
