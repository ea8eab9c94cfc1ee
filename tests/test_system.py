"""Tests for HostSystem command construction."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ffdev_setup.core.privilege import PrivilegedSession
from ffdev_setup.core.protocols import SystemOperations
from ffdev_setup.core.system import HostSystem

from fakes import FakeSystem

SUBPROCESS = "ffdev_setup.core.system.asyncio.create_subprocess_exec"


def _process(returncode=0, stdout=b"", stderr=b""):
    process = MagicMock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    return process


def test_implementations_satisfy_protocol():
    assert isinstance(HostSystem(), SystemOperations)
    assert isinstance(FakeSystem(), SystemOperations)


@pytest.mark.asyncio
async def test_privileged_command_uses_sudo_stdin():
    process = _process()
    session = PrivilegedSession(secret="pw")

    with patch(SUBPROCESS, AsyncMock(return_value=process)) as spawn:
        result = await HostSystem().extract_archive(
            session, Path("/tmp/a.tar.xz"), Path("/opt/firefox-dev")
        )

    argv = spawn.call_args.args
    assert argv == (
        "sudo",
        "-S",
        "-k",
        "-p",
        "",
        "--",
        "tar",
        "-xf",
        "/tmp/a.tar.xz",
        "-C",
        "/opt/firefox-dev",
    )
    process.communicate.assert_awaited_once_with(b"pw\n")
    # The recorded command never includes the sudo prefix
    assert result.argv[0] == "tar"
    assert result.ok


@pytest.mark.asyncio
async def test_root_session_runs_without_sudo():
    process = _process()

    with patch(SUBPROCESS, AsyncMock(return_value=process)) as spawn:
        await HostSystem().symlink(
            PrivilegedSession(secret=None),
            Path("/opt/firefox-dev/firefox/firefox"),
            Path("/usr/local/bin/firefox-dev"),
        )

    assert spawn.call_args.args == (
        "ln",
        "-sfn",
        "/opt/firefox-dev/firefox/firefox",
        "/usr/local/bin/firefox-dev",
    )
    process.communicate.assert_awaited_once_with(None)


@pytest.mark.asyncio
async def test_check_credential_runs_sudo_true():
    process = _process(returncode=1, stderr=b"Sorry, try again.")

    with patch(SUBPROCESS, AsyncMock(return_value=process)) as spawn:
        ok = await HostSystem().check_credential("bad")

    assert not ok
    assert spawn.call_args.args[-1] == "true"
    process.communicate.assert_awaited_once_with(b"bad\n")


@pytest.mark.asyncio
async def test_missing_binary_reports_127():
    with patch(SUBPROCESS, AsyncMock(side_effect=FileNotFoundError("nope"))):
        result = await HostSystem().run(["does-not-exist"])

    assert result.returncode == 127
    assert not result.ok


@pytest.mark.asyncio
async def test_privileged_write_installs_temp_file():
    process = _process()

    with patch(SUBPROCESS, AsyncMock(return_value=process)) as spawn:
        await HostSystem().write_file(
            Path("/etc/apparmor.d/firefox-dev"),
            "profile\n",
            session=PrivilegedSession(secret="pw"),
        )

    argv = spawn.call_args.args
    assert argv[6:10] == ("install", "-D", "-m", "644")
    assert argv[-1] == "/etc/apparmor.d/firefox-dev"
    assert not Path(argv[-2]).exists()


@pytest.mark.asyncio
async def test_unprivileged_write_and_remove(tmp_path: Path):
    system = HostSystem()
    target = tmp_path / "apps" / "firefox-dev.desktop"

    result = await system.write_file(target, "[Desktop Entry]\n", mode=0o755)

    assert result.ok
    assert target.read_text() == "[Desktop Entry]\n"
    assert target.stat().st_mode & 0o777 == 0o755

    result = await system.remove_path(target)
    assert result.ok
    assert not target.exists()
    assert (await system.remove_path(target)).ok


@pytest.mark.asyncio
async def test_remove_path_unlinks_symlinked_directory(tmp_path: Path):
    real = tmp_path / "elsewhere" / "mozilla-data"
    real.mkdir(parents=True)
    (real / "profiles.ini").write_text("")
    link = tmp_path / ".mozilla"
    link.symlink_to(real, target_is_directory=True)

    result = await HostSystem().remove_path(link)

    assert result.ok
    assert not link.is_symlink()
    assert (real / "profiles.ini").exists()


@pytest.mark.asyncio
async def test_service_is_active_uses_systemctl_quiet():
    process = _process(returncode=3)

    with patch(SUBPROCESS, AsyncMock(return_value=process)) as spawn:
        active = await HostSystem().service_is_active("apparmor")

    assert not active
    assert spawn.call_args.args == (
        "systemctl",
        "is-active",
        "--quiet",
        "apparmor",
    )
