"""Pytest configuration and fixtures for ffdev-setup tests."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

# Keep test logs out of the user's config directory
os.environ.setdefault(
    "FFDEV_SETUP_LOG_DIR", tempfile.mkdtemp(prefix="ffdev-setup-logs-")
)

from fakes import (  # noqa: E402
    PASSWORD,
    FakeSystem,
    RecordingObserver,
    ScriptedPrompt,
)

from ffdev_setup.config import InstallLayout  # noqa: E402
from ffdev_setup.core.context import WorkflowContext  # noqa: E402
from ffdev_setup.core.privilege import Authenticator  # noqa: E402


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("ffdev_setup"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def layout(tmp_path: Path) -> InstallLayout:
    """Install layout redirected into tmp_path."""
    return InstallLayout(
        download_url="https://example.invalid/firefox-dev.tar.xz",
        install_dir=tmp_path / "opt" / "firefox-dev",
        archive=tmp_path / "Downloads" / "firefox-dev.tar.xz",
        desktop_file=tmp_path / "applications" / "firefox-dev.desktop",
        bin_dir=tmp_path / "bin",
        apparmor_profile=tmp_path / "apparmor.d" / "firefox-dev",
        user_data_dir=tmp_path / ".mozilla",
    )


@pytest.fixture
def fake_system() -> FakeSystem:
    """Fake host with every required tool installed."""
    return FakeSystem()


@pytest.fixture
def observer() -> RecordingObserver:
    """Observer recording progress events."""
    return RecordingObserver()


@pytest.fixture
def prompt() -> ScriptedPrompt:
    """Prompt answering with the correct password."""
    return ScriptedPrompt([PASSWORD])


@pytest.fixture
def ctx(layout, fake_system, observer, prompt) -> WorkflowContext:
    """Workflow context wired to the fakes, running as a normal user."""
    return WorkflowContext(
        layout=layout,
        system=fake_system,
        authenticator=Authenticator(
            fake_system, prompt, is_root=lambda: False
        ),
        observer=observer,
    )
