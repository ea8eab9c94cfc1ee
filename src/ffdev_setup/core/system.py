"""Real ``SystemOperations`` implementation backed by the host.

External tools run through ``asyncio.create_subprocess_exec`` and are
awaited to completion. Privileged commands are prefixed with
``sudo -S -k -p ""`` and receive the session secret on stdin, so sudo
never prompts on the terminal and never reuses a cached timestamp.
"""

import asyncio
import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ffdev_setup.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    SUDO_ARGS,
    SUDO_BINARY,
)
from ffdev_setup.core.download import DownloadService, create_http_session
from ffdev_setup.core.privilege import PrivilegedSession
from ffdev_setup.core.protocols import CommandResult, ProgressObserver
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)

# Shell convention for "command not found"
_NOT_FOUND_EXIT = 127


class HostSystem:
    """Runs workflow operations against the real system."""

    def __init__(self, timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS) -> None:
        """Initialize host operations.

        Args:
            timeout_seconds: Network connect timeout for downloads

        """
        self.timeout_seconds = timeout_seconds

    def which(self, tool: str) -> str | None:
        """Return the resolved path of ``tool`` or None if absent."""
        return shutil.which(tool)

    async def _exec(
        self,
        argv: Sequence[str],
        stdin_data: bytes | None = None,
        display: Sequence[str] | None = None,
    ) -> CommandResult:
        """Spawn ``argv`` and wait for it to exit.

        Args:
            argv: Full command line to execute
            stdin_data: Bytes written to the child's stdin
            display: Command recorded in the result (hides the sudo prefix)

        Returns:
            Captured exit status and output

        """
        shown = tuple(display if display is not None else argv)
        logger.debug("Running: %s", " ".join(shown))
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=(
                    asyncio.subprocess.PIPE
                    if stdin_data is not None
                    else asyncio.subprocess.DEVNULL
                ),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            return CommandResult(shown, _NOT_FOUND_EXIT, stderr=str(e))

        stdout, stderr = await process.communicate(stdin_data)
        result = CommandResult(
            shown,
            process.returncode if process.returncode is not None else -1,
            stdout.decode("utf-8", errors="replace"),
            stderr.decode("utf-8", errors="replace"),
        )
        if not result.ok:
            logger.debug("Command failed: %s", result.describe())
        return result

    async def run(self, argv: Sequence[str]) -> CommandResult:
        """Run an unprivileged command to completion."""
        return await self._exec(argv)

    async def check_credential(self, secret: str | None) -> bool:
        """Validate a credential by running ``sudo true``."""
        if secret is None:
            return False
        result = await self._exec(
            [SUDO_BINARY, *SUDO_ARGS, "true"],
            stdin_data=f"{secret}\n".encode(),
            display=[SUDO_BINARY, "true"],
        )
        return result.ok

    async def run_privileged(
        self, session: PrivilegedSession, argv: Sequence[str]
    ) -> CommandResult:
        """Run a command with elevated privileges."""
        if session.is_root:
            return await self._exec(argv)
        return await self._exec(
            [SUDO_BINARY, *SUDO_ARGS, "--", *argv],
            stdin_data=session.stdin_payload(),
            display=argv,
        )

    async def download(
        self, url: str, dest: Path, observer: ProgressObserver
    ) -> None:
        """Stream ``url`` to ``dest``; raise DownloadError on failure."""
        async with create_http_session(self.timeout_seconds) as http:
            await DownloadService(http, observer).download_file(
                url, dest, title=dest.name
            )

    async def extract_archive(
        self, session: PrivilegedSession, archive: Path, target: Path
    ) -> CommandResult:
        """Extract ``archive`` into ``target`` with tar."""
        return await self.run_privileged(
            session, ["tar", "-xf", str(archive), "-C", str(target)]
        )

    async def make_directory(
        self, session: PrivilegedSession, path: Path
    ) -> CommandResult:
        """Create ``path`` and its parents."""
        return await self.run_privileged(session, ["mkdir", "-p", str(path)])

    async def set_permissions(
        self, session: PrivilegedSession, path: Path, mode: str
    ) -> CommandResult:
        """Apply a symbolic chmod ``mode`` recursively under ``path``."""
        return await self.run_privileged(
            session, ["chmod", "-R", mode, str(path)]
        )

    async def write_file(
        self,
        path: Path,
        content: str,
        *,
        mode: int = 0o644,
        session: PrivilegedSession | None = None,
    ) -> CommandResult:
        """Write ``content`` to ``path``.

        Privileged writes go through a temporary file that ``install``
        copies into place, so the content never passes through sudo's
        stdin.
        """
        if session is None:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
                path.chmod(mode)
            except OSError as e:
                return CommandResult(("write", str(path)), 1, stderr=str(e))
            return CommandResult(("write", str(path)), 0)

        fd, tmp_name = tempfile.mkstemp(prefix="ffdev-setup-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(content)
            return await self.run_privileged(
                session,
                ["install", "-D", "-m", f"{mode:o}", tmp_name, str(path)],
            )
        finally:
            Path(tmp_name).unlink(missing_ok=True)

    async def symlink(
        self, session: PrivilegedSession, target: Path, link: Path
    ) -> CommandResult:
        """Create or replace ``link`` pointing at ``target``."""
        return await self.run_privileged(
            session, ["ln", "-sfn", str(target), str(link)]
        )

    async def remove_path(
        self, path: Path, *, session: PrivilegedSession | None = None
    ) -> CommandResult:
        """Remove a file, symlink or directory tree."""
        if session is not None:
            return await self.run_privileged(
                session, ["rm", "-rf", "--", str(path)]
            )

        argv = ("rm", str(path))
        try:
            if path.is_symlink() or path.is_file():
                path.unlink(missing_ok=True)
            elif path.is_dir():
                shutil.rmtree(path)
        except OSError as e:
            return CommandResult(argv, 1, stderr=str(e))
        return CommandResult(argv, 0)

    async def service_is_active(self, name: str) -> bool:
        """Whether the systemd unit ``name`` is active."""
        result = await self.run(["systemctl", "is-active", "--quiet", name])
        return result.ok

    async def manage_service(
        self, session: PrivilegedSession, action: str, name: str
    ) -> CommandResult:
        """Run ``systemctl <action> <name>`` with privileges."""
        return await self.run_privileged(session, ["systemctl", action, name])
