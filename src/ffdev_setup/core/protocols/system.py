"""System operations protocol.

Every interaction with the host (external tools, privileged filesystem
mutations, services, the network) goes through ``SystemOperations`` so
workflow steps can run against a fake in tests. ``HostSystem`` in
``ffdev_setup.core.system`` is the real implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ffdev_setup.core.privilege import PrivilegedSession
    from ffdev_setup.core.protocols.progress import ProgressObserver


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an external command."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Whether the command exited with status 0."""
        return self.returncode == 0

    def describe(self) -> str:
        """Short failure description for log messages."""
        detail = self.stderr.strip() or self.stdout.strip()
        message = f"'{' '.join(self.argv)}' exited with {self.returncode}"
        return f"{message}: {detail}" if detail else message


@runtime_checkable
class SystemOperations(Protocol):
    """Host interactions needed by the install and uninstall workflows."""

    def which(self, tool: str) -> str | None:
        """Return the resolved path of ``tool`` or None if absent."""
        ...

    async def run(self, argv: Sequence[str]) -> CommandResult:
        """Run an unprivileged command to completion."""
        ...

    async def check_credential(self, secret: str | None) -> bool:
        """Validate a credential with a no-op privileged command."""
        ...

    async def run_privileged(
        self, session: PrivilegedSession, argv: Sequence[str]
    ) -> CommandResult:
        """Run a command with elevated privileges."""
        ...

    async def download(
        self, url: str, dest: Path, observer: ProgressObserver
    ) -> None:
        """Stream ``url`` to ``dest``; raise DownloadError on failure."""
        ...

    async def extract_archive(
        self, session: PrivilegedSession, archive: Path, target: Path
    ) -> CommandResult:
        """Extract ``archive`` into the existing directory ``target``."""
        ...

    async def make_directory(
        self, session: PrivilegedSession, path: Path
    ) -> CommandResult:
        """Create ``path`` and its parents."""
        ...

    async def set_permissions(
        self, session: PrivilegedSession, path: Path, mode: str
    ) -> CommandResult:
        """Apply a symbolic chmod ``mode`` recursively under ``path``."""
        ...

    async def write_file(
        self,
        path: Path,
        content: str,
        *,
        mode: int = 0o644,
        session: PrivilegedSession | None = None,
    ) -> CommandResult:
        """Write ``content`` to ``path``, privileged if a session is given."""
        ...

    async def symlink(
        self, session: PrivilegedSession, target: Path, link: Path
    ) -> CommandResult:
        """Create or replace ``link`` pointing at ``target``."""
        ...

    async def remove_path(
        self, path: Path, *, session: PrivilegedSession | None = None
    ) -> CommandResult:
        """Remove a file, symlink or directory tree; missing is fine."""
        ...

    async def service_is_active(self, name: str) -> bool:
        """Whether the system service ``name`` is running."""
        ...

    async def manage_service(
        self, session: PrivilegedSession, action: str, name: str
    ) -> CommandResult:
        """Run a service-control ``action`` (enable, start) on ``name``."""
        ...
