"""Path constants for ffdev-setup's own configuration files."""

from pathlib import Path

from ffdev_setup.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
