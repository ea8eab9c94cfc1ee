"""Console spinner implementing ``ProgressObserver``.

The spinner is an asyncio task that redraws one line while the wrapped
operation is pending. It carries no data back to the workflow. When the
stream is not a terminal, only start and finish lines are written.
"""

from __future__ import annotations

import asyncio
import contextlib
import sys
import time
from typing import TextIO

from ffdev_setup.constants import SPINNER_FRAMES, SPINNER_INTERVAL_SECONDS
from ffdev_setup.logger import flush_all_handlers


def format_bytes(size: float) -> str:
    """Return a human-readable size such as ``12.3 MiB``."""
    if size < 1024:  # noqa: PLR2004
        return f"{int(size)} B"
    for unit in ("KiB", "MiB"):
        size /= 1024
        if size < 1024:  # noqa: PLR2004
            return f"{size:.1f} {unit}"
    return f"{size / 1024:.1f} GiB"


class SpinnerObserver:
    """Draws a spinner and byte counter for the running operation."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the spinner.

        Args:
            stream: Output stream (defaults to stderr)

        """
        self.stream = stream or sys.stderr
        self.interactive = self.stream.isatty()
        self._task: asyncio.Task[None] | None = None
        self._title = ""
        self._detail = ""
        self._started_at = 0.0

    def started(self, title: str) -> None:
        """Show ``title`` and start animating."""
        flush_all_handlers()
        self._title = title
        self._detail = ""
        self._started_at = time.monotonic()
        if not self.interactive:
            self.stream.write(f"{title}...\n")
            self.stream.flush()
            return
        with contextlib.suppress(RuntimeError):
            self._task = asyncio.get_running_loop().create_task(
                self._spin()
            )

    def advanced(self, title: str, completed: int, total: int | None) -> None:
        """Record byte progress shown next to the spinner."""
        if total:
            percent = completed * 100 // total
            self._detail = (
                f"{format_bytes(completed)} / {format_bytes(total)} "
                f"({percent}%)"
            )
        else:
            self._detail = format_bytes(completed)

    def finished(self, title: str, *, success: bool) -> None:
        """Stop animating and print the final status line."""
        if self._task is not None:
            self._task.cancel()
            self._task = None
        elapsed = time.monotonic() - self._started_at
        mark = "✅" if success else "❌"
        prefix = "\r\033[K" if self.interactive else ""
        self.stream.write(f"{prefix}{mark} {title} ({elapsed:.1f}s)\n")
        self.stream.flush()

    async def _spin(self) -> None:
        frame = 0
        while True:
            symbol = SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]
            line = f"{symbol} {self._title}"
            if self._detail:
                line = f"{line}  {self._detail}"
            self.stream.write(f"\r\033[K{line}")
            self.stream.flush()
            frame += 1
            await asyncio.sleep(SPINNER_INTERVAL_SECONDS)
