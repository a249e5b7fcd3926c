"""Process bootstrap and Flet launch, shared by both demo entry points."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from dotenv import load_dotenv

import flet as ft
from statelab.shared.core.configuration import SystemConfig, get_config_manager
from statelab.shared.core.logging_config import configure_logging

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent.resolve()

logger = logging.getLogger(__name__)


def bootstrap() -> SystemConfig:
    """Load ``.env``, read the merged configuration and set up logging."""
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")
    # Later get_config() calls reuse this manager
    config = get_config_manager(PROJECT_ROOT).get_config()
    configure_logging(config.logging, base_dir=PROJECT_ROOT)
    return config


def launch(main: Callable[[ft.Page], None], config: SystemConfig) -> None:
    """Run a Flet app in desktop or web mode according to ``config.ui``."""
    ui = config.ui
    if ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {ui.flet_port}")
        renderer = (
            ft.WebRenderer.AUTO
            if ui.flet_web_renderer.lower() == "auto"
            else ft.WebRenderer.CANVAS_KIT
        )
        ft.run(
            main,
            view=ft.AppView.FLET_APP_WEB,
            port=ui.flet_port,
            host="127.0.0.1",
            web_renderer=renderer,
        )
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)
