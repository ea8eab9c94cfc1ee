"""Test doubles for host operations, progress and prompts."""

import shutil
from collections.abc import Sequence
from pathlib import Path

from ffdev_setup.core.privilege import PrivilegedSession
from ffdev_setup.core.protocols import CommandResult
from ffdev_setup.exceptions import DownloadError

PASSWORD = "hunter2"
ARCHIVE_BYTES = b"fake tar.xz payload"


class FakeSystem:
    """SystemOperations double acting on real files under tmp_path.

    Every call is appended to ``calls`` as ``(operation, *details)``.
    Operation names listed in ``failures`` return exit status 1.
    """

    MUTATING = frozenset(
        {
            "privileged",
            "extract",
            "mkdir",
            "chmod",
            "write",
            "symlink",
            "remove",
            "service",
            "download",
        }
    )

    def __init__(
        self,
        tools: Sequence[str] = (
            "tar",
            "xz",
            "systemctl",
            "apparmor_parser",
            "apt-get",
        ),
        password: str = PASSWORD,
    ) -> None:
        self.tools = set(tools)
        self.password = password
        self.failures: set[str] = set()
        self.calls: list[tuple] = []
        self.service_active = True
        self.tar_version_output = "tar (GNU tar) 1.35\n"
        self.download_error: str | None = None

    # helpers

    def _result(self, op: str, argv: Sequence[str]) -> CommandResult:
        if op in self.failures:
            return CommandResult(tuple(argv), 1, stderr=f"{op} failed")
        return CommandResult(tuple(argv), 0)

    def ops(self) -> list[str]:
        """Operation names in call order."""
        return [call[0] for call in self.calls]

    def mutations(self) -> list[tuple]:
        """Calls that change system state."""
        return [call for call in self.calls if call[0] in self.MUTATING]

    def privileged_commands(self) -> list[tuple[str, ...]]:
        """argv of every run_privileged call."""
        return [call[1] for call in self.calls if call[0] == "privileged"]

    # SystemOperations

    def which(self, tool: str) -> str | None:
        return f"/usr/bin/{tool}" if tool in self.tools else None

    async def run(self, argv: Sequence[str]) -> CommandResult:
        argv = tuple(argv)
        self.calls.append(("run", argv))
        if argv == ("tar", "--version"):
            return CommandResult(argv, 0, stdout=self.tar_version_output)
        return self._result(argv[0], argv)

    async def check_credential(self, secret: str | None) -> bool:
        self.calls.append(("check_credential",))
        return secret == self.password

    async def run_privileged(
        self, session: PrivilegedSession, argv: Sequence[str]
    ) -> CommandResult:
        argv = tuple(argv)
        self.calls.append(("privileged", argv))
        return self._result(argv[0], argv)

    async def download(self, url: str, dest: Path, observer) -> None:
        self.calls.append(("download", url, dest))
        if self.download_error is not None:
            raise DownloadError(self.download_error, url)
        dest.write_bytes(ARCHIVE_BYTES)
        observer.advanced(dest.name, len(ARCHIVE_BYTES), len(ARCHIVE_BYTES))

    async def extract_archive(
        self, session: PrivilegedSession, archive: Path, target: Path
    ) -> CommandResult:
        self.calls.append(("extract", archive, target))
        result = self._result("extract", ("tar", "-xf", str(archive)))
        if not result.ok:
            return result
        executable = target / "firefox" / "firefox"
        icon = (
            target
            / "firefox"
            / "browser"
            / "chrome"
            / "icons"
            / "default"
            / "default128.png"
        )
        for path in (executable, icon):
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"")
        return result

    async def make_directory(
        self, session: PrivilegedSession, path: Path
    ) -> CommandResult:
        self.calls.append(("mkdir", path))
        result = self._result("mkdir", ("mkdir", "-p", str(path)))
        if result.ok:
            path.mkdir(parents=True, exist_ok=True)
        return result

    async def set_permissions(
        self, session: PrivilegedSession, path: Path, mode: str
    ) -> CommandResult:
        self.calls.append(("chmod", path, mode))
        return self._result("chmod", ("chmod", "-R", mode, str(path)))

    async def write_file(
        self,
        path: Path,
        content: str,
        *,
        mode: int = 0o644,
        session: PrivilegedSession | None = None,
    ) -> CommandResult:
        self.calls.append(("write", path, mode, session is not None))
        result = self._result("write", ("write", str(path)))
        if result.ok:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return result

    async def symlink(
        self, session: PrivilegedSession, target: Path, link: Path
    ) -> CommandResult:
        self.calls.append(("symlink", target, link))
        result = self._result("symlink", ("ln", "-sfn", str(target)))
        if result.ok:
            link.parent.mkdir(parents=True, exist_ok=True)
            if link.is_symlink() or link.exists():
                link.unlink()
            link.symlink_to(target)
        return result

    async def remove_path(
        self, path: Path, *, session: PrivilegedSession | None = None
    ) -> CommandResult:
        self.calls.append(("remove", path, session is not None))
        result = self._result("remove", ("rm", "-rf", str(path)))
        if not result.ok:
            return result
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
        return result

    async def service_is_active(self, name: str) -> bool:
        self.calls.append(("service_is_active", name))
        return self.service_active

    async def manage_service(
        self, session: PrivilegedSession, action: str, name: str
    ) -> CommandResult:
        self.calls.append(("service", action, name))
        return self._result("service", ("systemctl", action, name))


class RecordingObserver:
    """ProgressObserver that records every event."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def started(self, title: str) -> None:
        self.events.append(("started", title))

    def advanced(self, title: str, completed: int, total: int | None) -> None:
        self.events.append(("advanced", title, completed, total))

    def finished(self, title: str, *, success: bool) -> None:
        self.events.append(("finished", title, success))


class ScriptedPrompt:
    """Secret prompt returning queued answers and counting calls."""

    def __init__(self, answers: Sequence[str]) -> None:
        self.answers = list(answers)
        self.calls = 0

    def __call__(self, prompt: str) -> str:
        self.calls += 1
        return self.answers.pop(0)
