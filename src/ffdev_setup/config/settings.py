"""Global configuration manager for INI settings."""

import configparser
from pathlib import Path

from ffdev_setup.config.paths import Paths
from ffdev_setup.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    FIREFOX_DEV_URL,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DOWNLOAD_URL,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_NETWORK,
    SECTION_SOURCE,
)
from ffdev_setup.exceptions import ConfigurationError
from ffdev_setup.logger import get_logger
from ffdev_setup.types import GlobalConfig

logger = get_logger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]

_VALID_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_FILE_HEADER = """\
# ffdev-setup configuration
#
# Install locations are fixed. Only logging, network and the download
# source can be changed here.

"""


class ConfigManager:
    """Manages the global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_SOURCE: {KEY_DOWNLOAD_URL: FIREFOX_DEV_URL},
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults.

        Args:
            defaults: Default configuration values

        Returns:
            ConfigParser populated with defaults

        """
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file.

        Creates the settings file with defaults when it does not exist.

        Returns:
            Loaded global configuration

        Raises:
            ConfigurationError: If a value cannot be converted

        """
        config = self._create_config_from_defaults(
            self.get_default_global_config()
        )

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                msg = f"Cannot parse settings file: {e}"
                raise ConfigurationError(msg, str(self.settings_file)) from e
        else:
            try:
                self.save_config(config)
            except OSError as e:
                # Defaults still apply when the file cannot be written
                logger.warning(
                    "Could not write default settings to %s: %s",
                    self.settings_file,
                    e,
                )

        return self._convert_to_global_config(config)

    def save_config(self, config: configparser.ConfigParser) -> None:
        """Save configuration to the INI file with a comment header.

        Args:
            config: Parser holding the values to save

        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(_FILE_HEADER)
            config.write(f)
        logger.debug("Settings written to %s", self.settings_file)

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert ConfigParser to typed GlobalConfig.

        Args:
            config: Parsed configuration

        Returns:
            Typed global configuration

        Raises:
            ConfigurationError: If a value is invalid

        """
        defaults = config[SECTION_DEFAULT]
        log_level = self._level(defaults.get(KEY_LOG_LEVEL))
        console_level = self._level(defaults.get(KEY_CONSOLE_LOG_LEVEL))

        try:
            timeout = config.getint(SECTION_NETWORK, KEY_TIMEOUT_SECONDS)
        except ValueError as e:
            msg = f"{KEY_TIMEOUT_SECONDS} must be an integer"
            raise ConfigurationError(msg, SECTION_NETWORK) from e

        return {
            "config_version": defaults.get(KEY_CONFIG_VERSION, CONFIG_VERSION),
            "log_level": log_level,
            "console_log_level": console_level,
            "network": {"timeout_seconds": timeout},
            "source": {
                "download_url": config.get(SECTION_SOURCE, KEY_DOWNLOAD_URL)
            },
        }

    @staticmethod
    def _level(value: str | None) -> str:
        level = (value or "").strip().upper()
        if level not in _VALID_LEVELS:
            msg = f"unknown log level {value!r}"
            raise ConfigurationError(msg)
        return level
