"""Root logger setup shared by both demo apps.

File handler: everything at the configured level, rotated under ``log_dir``.
Console handler: warnings and errors only.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from statelab.shared.core.configuration import LoggingConfig

LOG_FILE_NAME = "statelab.log"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Third-party loggers that flood the file handler at DEBUG
_QUIET_LOGGERS = {
    "flet": logging.INFO,
    "flet_controls": logging.WARNING,
    "flet_transport": logging.WARNING,
    "asyncio": logging.WARNING,
    "fletx.core.state": logging.CRITICAL,  # observer errors during shutdown
}


def _level(name: str, default: int) -> int:
    return _LEVELS.get(name.upper(), default)


def configure_logging(config: LoggingConfig, base_dir: Optional[Path] = None) -> Path:
    """Install file and console handlers on the root logger.

    Existing root handlers are removed so repeated calls do not duplicate
    output.

    Args:
        config: Logging section of the system configuration.
        base_dir: Directory that a relative ``config.log_dir`` resolves
            against. Defaults to the current working directory.

    Returns:
        Path of the log file.
    """
    log_dir = Path(config.log_dir)
    if not log_dir.is_absolute():
        log_dir = (base_dir or Path.cwd()) / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / LOG_FILE_NAME

    file_log_level = _level(config.level, logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level(config.console_level, logging.WARNING))
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).info(
        f"Logging configured: file={log_file_path}, console={config.console_level.upper()}+"
    )
    return log_file_path
