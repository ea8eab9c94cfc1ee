"""Centralized constants module for ffdev-setup.

Constants are organized by logical categories and use typing.Final
annotations to ensure immutability.

Usage:
    from ffdev_setup.constants import DEFAULT_INSTALL_DIR
"""

from pathlib import Path
from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "ffdev-setup"

DEFAULT_LOG_LEVEL: Final[str] = "DEBUG"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 30

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_SOURCE: Final[str] = "source"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_DOWNLOAD_URL: Final[str] = "download_url"

# =============================================================================
# Installation Layout
# =============================================================================

APP_DISPLAY_NAME: Final[str] = "Firefox Developer Edition"
CLI_COMMAND_NAME: Final[str] = "firefox-dev"

FIREFOX_DEV_URL: Final[str] = (
    "https://download.mozilla.org/"
    "?product=firefox-devedition-latest-ssl&os=linux64&lang=en-US"
)

DEFAULT_INSTALL_DIR: Final[Path] = Path("/opt/firefox-dev")
DEFAULT_ARCHIVE_PATH: Final[Path] = (
    Path.home() / "Downloads" / "firefox-dev.tar.xz"
)
DEFAULT_DESKTOP_FILE: Final[Path] = (
    Path.home() / ".local" / "share" / "applications" / "firefox-dev.desktop"
)
DEFAULT_BIN_DIR: Final[Path] = Path("/usr/local/bin")
DEFAULT_APPARMOR_PROFILE: Final[Path] = Path("/etc/apparmor.d/firefox-dev")
DEFAULT_USER_DATA_DIR: Final[Path] = Path.home() / ".mozilla"

# Relative to the install directory
EXECUTABLE_SUBPATH: Final[tuple[str, ...]] = ("firefox", "firefox")
ICON_SUBPATH: Final[tuple[str, ...]] = (
    "firefox",
    "browser",
    "chrome",
    "icons",
    "default",
    "default128.png",
)

# chmod -R mode applied to the extracted tree
INSTALL_PERMISSIONS: Final[str] = "a+rx"

# =============================================================================
# Dependency Constants
# =============================================================================

# Tool name -> package name per package manager (default: the tool name)
REQUIRED_TOOLS: Final[dict[str, dict[str, str]]] = {
    "tar": {},
    "xz": {"apt-get": "xz-utils", "zypper": "xz", "pacman": "xz"},
    "systemctl": {"apt-get": "systemd", "dnf": "systemd"},
    "apparmor_parser": {
        "apt-get": "apparmor",
        "dnf": "apparmor-parser",
        "zypper": "apparmor-parser",
        "pacman": "apparmor",
    },
}

# Tool whose version is checked; a mismatch only warns
VERSION_CHECKED_TOOL: Final[str] = "tar"
VERSION_REQUIREMENT: Final[str] = ">=1.30"

_Command = tuple[str, ...]

# Package manager binary -> (refresh command, install command prefix)
PACKAGE_MANAGERS: Final[dict[str, tuple[_Command, _Command]]] = {
    "apt-get": (("apt-get", "update", "-y"), ("apt-get", "install", "-y")),
    "dnf": (("dnf", "makecache", "-y"), ("dnf", "install", "-y")),
    "zypper": (
        ("zypper", "--non-interactive", "refresh"),
        ("zypper", "--non-interactive", "install"),
    ),
    "pacman": (
        ("pacman", "-Sy", "--noconfirm"),
        ("pacman", "-S", "--noconfirm"),
    ),
}

# =============================================================================
# Privilege Constants
# =============================================================================

SUDO_BINARY: Final[str] = "sudo"
# -S: read secret from stdin, -k: ignore cached timestamp, -p "": no prompt
SUDO_ARGS: Final[tuple[str, ...]] = ("-S", "-k", "-p", "")
PASSWORD_PROMPT: Final[str] = "Please enter your 'sudo' password: "

# =============================================================================
# Sandbox (AppArmor) Constants
# =============================================================================

APPARMOR_SERVICE: Final[str] = "apparmor"
APPARMOR_PROFILE_NAME: Final[str] = "firefox-dev"
APPARMOR_PROFILE_TEMPLATE: Final[str] = (
    "abi <abi/4.0>,\n"
    "include <tunables/global>\n"
    "\n"
    'profile {name} "{executable}" flags=(unconfined) {{\n'
    "  userns,\n"
    "  include if exists <local/firefox>\n"
    "}}\n"
)

# =============================================================================
# Desktop (.desktop) file related constants
# =============================================================================

DESKTOP_SECTION_HEADER: Final[str] = "[Desktop Entry]"
DESKTOP_FILE_TYPE: Final[str] = "Application"
DESKTOP_EXEC_PARAM: Final[str] = "%u"
DESKTOP_COMMENT: Final[str] = "Firefox Developer Edition Browser"
DESKTOP_CATEGORIES: Final[tuple[str, ...]] = ("Network", "WebBrowser")
DESKTOP_MIME_TYPES: Final[tuple[str, ...]] = (
    "text/html",
    "text/xml",
    "application/xhtml+xml",
)
DESKTOP_TRUSTED_ATTRIBUTE: Final[str] = "metadata::trusted"

# =============================================================================
# Download Constants
# =============================================================================

DOWNLOAD_CHUNK_SIZE: Final[int] = 64 * 1024

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "ffdev-setup.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# UI Constants
# =============================================================================

SPINNER_FRAMES: Final[str] = "|/-\\"
SPINNER_INTERVAL_SECONDS: Final[float] = 0.1
AFFIRMATIVE_ANSWERS: Final[frozenset[str]] = frozenset({"y", "yes"})
