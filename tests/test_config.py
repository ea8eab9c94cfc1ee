"""Tests for ConfigManager and InstallLayout."""

from pathlib import Path

import pytest

from ffdev_setup.config import ConfigManager, InstallLayout
from ffdev_setup.constants import (
    DEFAULT_INSTALL_DIR,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_DATA_DIR,
    FIREFOX_DEV_URL,
)
from ffdev_setup.exceptions import ConfigurationError


def test_missing_file_created_with_defaults(tmp_path: Path):
    manager = ConfigManager(config_dir=tmp_path / "cfg")

    config = manager.load_global_config()

    assert manager.settings_file.exists()
    text = manager.settings_file.read_text()
    assert text.startswith("# ffdev-setup configuration")
    assert "[paths]" not in text
    assert config["network"]["timeout_seconds"] == DEFAULT_TIMEOUT_SECONDS
    assert config["source"]["download_url"] == FIREFOX_DEV_URL
    assert config["console_log_level"] == "INFO"


def test_overrides_are_read(tmp_path: Path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.settings_file.write_text(
        "[DEFAULT]\n"
        "console_log_level = warning\n"
        "[network]\n"
        "timeout_seconds = 5\n"
        "[source]\n"
        "download_url = https://example.invalid/ff.tar.xz\n"
    )

    config = manager.load_global_config()

    assert config["console_log_level"] == "WARNING"
    assert config["network"]["timeout_seconds"] == 5
    assert config["source"]["download_url"] == (
        "https://example.invalid/ff.tar.xz"
    )


def test_paths_section_cannot_move_artifacts(tmp_path: Path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.settings_file.write_text(
        "[paths]\n"
        "install_dir = ~\n"
        "user_data_dir = ~\n"
    )

    layout = InstallLayout.from_config(manager.load_global_config())

    assert layout.install_dir == DEFAULT_INSTALL_DIR
    assert layout.user_data_dir == DEFAULT_USER_DATA_DIR


def test_invalid_timeout_raises(tmp_path: Path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.settings_file.write_text("[network]\ntimeout_seconds = soon\n")

    with pytest.raises(ConfigurationError, match="timeout_seconds"):
        manager.load_global_config()


def test_invalid_log_level_raises(tmp_path: Path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.settings_file.write_text("[DEFAULT]\nlog_level = LOUD\n")

    with pytest.raises(ConfigurationError, match="LOUD"):
        manager.load_global_config()


def test_unparsable_file_raises(tmp_path: Path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.settings_file.write_text("not an ini file\n")

    with pytest.raises(ConfigurationError):
        manager.load_global_config()


def test_layout_from_config(tmp_path: Path):
    config = ConfigManager(config_dir=tmp_path).load_global_config()

    layout = InstallLayout.from_config(config)

    assert layout.download_url == FIREFOX_DEV_URL
    assert layout.install_dir == Path("/opt/firefox-dev")
    assert layout.executable == Path("/opt/firefox-dev/firefox/firefox")
    assert layout.cli_symlink == Path("/usr/local/bin/firefox-dev")
    assert layout.icon.name == "default128.png"


def test_layout_paths_are_not_resolved():
    layout = InstallLayout()

    assert layout.user_data_dir == Path.home() / ".mozilla"
    assert layout.desktop_file == (
        Path.home() / ".local/share/applications/firefox-dev.desktop"
    )
