"""Configuration management - settings file, paths and install layout.

This package provides:
- ConfigManager: INI settings management (from settings.py)
- InstallLayout: Locations of every installed artifact (from layout.py)
- Paths: Locations of ffdev-setup's own files (from paths.py)
"""

from ffdev_setup.config.layout import InstallLayout
from ffdev_setup.config.paths import Paths
from ffdev_setup.config.settings import ConfigManager
from ffdev_setup.types import GlobalConfig

__all__ = [
    "ConfigManager",
    "GlobalConfig",
    "InstallLayout",
    "Paths",
]
