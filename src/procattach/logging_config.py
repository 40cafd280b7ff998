"""
Centralized logging configuration.

This module provides a single setup_logging function that configures
logging consistently with:
- Console output (technical format, or message-only for operators)
- Optional file output to logs/{service_name}.log
- Fresh log file on each start unless LOG_APPEND=1
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional

from .config import env_bool, env_str

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"
_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # policy_guard: allow-silent-handler
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger)
    root_logger.handlers = []


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING if user_friendly else logging.DEBUG)
    return console_handler


def _resolve_log_directory() -> Path:
    configured = env_str("PROCATTACH_LOG_DIR")
    if configured:
        return Path(configured).expanduser()
    return Path.cwd() / "logs"


def _configure_file_handler(service_name: Optional[str]) -> Optional[logging.Handler]:
    if not service_name:
        return None

    logs_dir = _resolve_log_directory()
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{service_name}.log"
    file_mode = "a" if env_bool("LOG_APPEND", or_value=False) else "w"

    file_handler = logging.handlers.WatchedFileHandler(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def setup_logging(service_name: Optional[str] = None, user_friendly: bool = False, level: int = logging.INFO):
    """Configure root logging; safe to call more than once."""

    with _config_lock:
        root_logger = logging.getLogger()
        _reset_all_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(user_friendly))

        file_handler = _configure_file_handler(service_name)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(level)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
