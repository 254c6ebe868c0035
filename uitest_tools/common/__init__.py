"""
================================================================================
UI Test Tools Common Utilities
================================================================================

Configuration access and loguru setup shared by the suite, its fixtures and
the page objects.

Usage:
    from uitest_tools.common import get_config, get_timeout, init_logger

    init_logger()
    toast_ms = get_timeout("toast", 3000)

================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from .config_loader import DEFAULT_CONFIG_PATH, ConfigLoader, ConfigurationError


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for `ConfigLoader().get(key, default)`."""
    return ConfigLoader().get(key, default)


def get_timeout(name: str, default: int) -> int:
    """Shortcut for `ConfigLoader().get_timeout(name, default)`."""
    return ConfigLoader().get_timeout(name, default)


# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False

# {extra[worker]} is "main" outside pytest-xdist, "gw0", "gw1", ... inside it
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[worker]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def worker_id() -> str:
    return os.environ.get("PYTEST_XDIST_WORKER", "main")


def worker_log_file(log_file: str) -> Path:
    """
    Per-worker log path: `ui_tests.log` becomes `ui_tests.gw0.log` under
    xdist, so rotating workers never share a file.
    """
    path = Path(log_file)
    worker = worker_id()
    if worker != "main":
        path = path.with_name(f"{path.stem}.{worker}{path.suffix}")
    return path


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Route loguru to stderr and, when configured, to a rotating file.

    Args:
        level: Log level; defaults to `logging.level`
        log_file: Log file path; defaults to `logging.file` (None disables it)
        force: Re-initialize even if already configured

    Example:
        init_logger(level="DEBUG", log_file="reports/logs/ui.log")
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    logger.remove()
    logger.configure(extra={"worker": worker_id()})

    level = level or get_config("logging.level", "INFO")
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True)

    log_file = log_file or get_config("logging.file")
    if log_file:
        path = worker_log_file(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            format=LOG_FORMAT,
            level=level,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            enqueue=True,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized (level={level}, worker={worker_id()})")


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "get_config",
    "get_timeout",
    "init_logger",
    "worker_log_file",
]
