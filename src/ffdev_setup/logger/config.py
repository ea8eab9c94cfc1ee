"""Configuration loading and updating for logging system.

The logger is bootstrapped with hardcoded defaults because the config
package itself logs; settings file levels are applied afterwards through
update_logger_from_config().
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from ffdev_setup.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from ffdev_setup.logger.state import _LoggerState
    from ffdev_setup.types import GlobalConfig


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        FFDEV_SETUP_LOG_DIR: Overrides the log directory path. Used by the
        test suite to keep test logs out of the user's config directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv("FFDEV_SETUP_LOG_DIR")
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def apply_log_levels(
    state: "_LoggerState", console_level_str: str, file_level_str: str
) -> None:
    """Update handler levels on the running QueueListener.

    Args:
        state: Logger state object (from logger.state module)
        console_level_str: New console level name
        file_level_str: New file level name

    """
    console_level = getattr(logging, console_level_str, logging.INFO)
    file_level = getattr(logging, file_level_str, logging.DEBUG)

    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(file_level)
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console_level)


def set_console_level(state: "_LoggerState", level_str: str) -> None:
    """Change only the console handler level, leaving the file handler.

    Args:
        state: Logger state object (from logger.state module)
        level_str: New console level name

    """
    if state.queue_listener is None:
        return

    level = getattr(logging, level_str, logging.INFO)
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, RotatingFileHandler
        ):
            handler.setLevel(level)


def update_logger_from_config(
    state: "_LoggerState", config: "GlobalConfig"
) -> None:
    """Apply log levels from the loaded global config.

    Only updates handler levels, never adds/removes handlers.

    Args:
        state: Logger state object (from logger.state module)
        config: Loaded global configuration

    """
    apply_log_levels(
        state,
        config.get("console_log_level", DEFAULT_CONSOLE_LOG_LEVEL),
        config.get("log_level", DEFAULT_LOG_LEVEL),
    )
