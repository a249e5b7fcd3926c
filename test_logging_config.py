"""Tests for root logger setup and exit cleanup."""

import logging
import logging.handlers

from statelab.shared.core import service_registry
from statelab.shared.core.configuration import LoggingConfig
from statelab.shared.core.logging_config import LOG_FILE_NAME, configure_logging


def test_configure_logging_installs_file_and_console(tmp_path, restore_root_logger):
    config = LoggingConfig(level="info", log_dir="logs")

    log_file = configure_logging(config, base_dir=tmp_path)

    assert log_file == tmp_path / "logs" / LOG_FILE_NAME
    assert log_file.parent.is_dir()
    handlers = restore_root_logger.handlers
    assert len(handlers) == 2
    file_handler = next(h for h in handlers if isinstance(h, logging.handlers.RotatingFileHandler))
    assert file_handler.level == logging.INFO
    console = next(h for h in handlers if not isinstance(h, logging.handlers.RotatingFileHandler))
    assert console.level == logging.WARNING


def test_configure_logging_twice_does_not_duplicate(tmp_path, restore_root_logger):
    config = LoggingConfig(log_dir=str(tmp_path))

    configure_logging(config)
    configure_logging(config)

    assert len(restore_root_logger.handlers) == 2


def test_cleanup_runs_handlers_and_survives_failures():
    service_registry.clear_cleanup_handlers()
    calls = []

    def broken():
        raise RuntimeError("cleanup failed")

    service_registry.register_cleanup_handler(broken)
    service_registry.register_cleanup_handler(lambda: calls.append("ran"))

    service_registry._cleanup_all()

    assert calls == ["ran"]
    service_registry._cleanup_all()
    assert calls == ["ran"]
