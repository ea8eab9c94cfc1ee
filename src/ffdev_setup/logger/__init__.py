"""Logging utilities for ffdev-setup.

Architecture:
    Application → QueueHandler → Queue → QueueListener Thread
                                              ↓
                                    Console + File Handlers

Usage:
    >>> from ffdev_setup.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Installing to %s", install_dir)

Environment Variables:
    FFDEV_SETUP_LOG_DIR: Override the log directory (used by tests).

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls; use %-formatting
"""

from ffdev_setup.logger.config import (
    set_console_level as _set_console_level,
)
from ffdev_setup.logger.config import (
    update_logger_from_config as _update_config,
)
from ffdev_setup.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from ffdev_setup.logger.handlers import LoggingSetupError
from ffdev_setup.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from ffdev_setup.logger.state import get_state
from ffdev_setup.types import GlobalConfig

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "LoggingSetupError",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config: GlobalConfig) -> None:
    """Apply settings file log levels to the running handlers.

    Args:
        config: Loaded global configuration

    """
    _update_config(get_state(), config)


def set_console_level(level: str) -> None:
    """Change the console handler level (used by --verbose)."""
    _set_console_level(get_state(), level)
