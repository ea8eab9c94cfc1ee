"""Centralized type definitions for ffdev-setup."""

from typing import TypedDict


class NetworkConfig(TypedDict):
    """Network configuration options."""

    timeout_seconds: int


class SourceConfig(TypedDict):
    """Where the release archive comes from."""

    download_url: str


class GlobalConfig(TypedDict):
    """Global application configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    network: NetworkConfig
    source: SourceConfig
