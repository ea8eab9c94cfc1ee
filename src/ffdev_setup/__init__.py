"""Top-level package for ffdev-setup.

Installs and removes Firefox Developer Edition on Linux desktops.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ffdev-setup")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
