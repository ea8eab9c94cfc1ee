"""Filesystem layout of a Firefox Developer Edition installation."""

from dataclasses import dataclass
from pathlib import Path

from ffdev_setup.constants import (
    CLI_COMMAND_NAME,
    DEFAULT_APPARMOR_PROFILE,
    DEFAULT_ARCHIVE_PATH,
    DEFAULT_BIN_DIR,
    DEFAULT_DESKTOP_FILE,
    DEFAULT_INSTALL_DIR,
    DEFAULT_USER_DATA_DIR,
    EXECUTABLE_SUBPATH,
    FIREFOX_DEV_URL,
    ICON_SUBPATH,
)
from ffdev_setup.types import GlobalConfig


@dataclass(frozen=True)
class InstallLayout:
    """Every path the installer writes to or removes."""

    download_url: str = FIREFOX_DEV_URL
    install_dir: Path = DEFAULT_INSTALL_DIR
    archive: Path = DEFAULT_ARCHIVE_PATH
    desktop_file: Path = DEFAULT_DESKTOP_FILE
    bin_dir: Path = DEFAULT_BIN_DIR
    apparmor_profile: Path = DEFAULT_APPARMOR_PROFILE
    user_data_dir: Path = DEFAULT_USER_DATA_DIR

    @classmethod
    def from_config(cls, config: GlobalConfig) -> "InstallLayout":
        """Build the layout from the loaded global configuration.

        Only the download source is configurable. Paths are fixed and
        never resolved: a symlinked artifact is handled as the link.
        """
        return cls(download_url=config["source"]["download_url"])

    @property
    def executable(self) -> Path:
        """Absolute path of the browser binary inside the install dir."""
        return self.install_dir.joinpath(*EXECUTABLE_SUBPATH)

    @property
    def icon(self) -> Path:
        """Absolute path of the 128px application icon."""
        return self.install_dir.joinpath(*ICON_SUBPATH)

    @property
    def cli_symlink(self) -> Path:
        """Path of the short command registered in the bin directory."""
        return self.bin_dir / CLI_COMMAND_NAME
