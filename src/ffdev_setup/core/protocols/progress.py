"""Progress reporting protocol for core workflow steps.

Steps report start/finish (and byte progress for downloads) to an observer
without knowing how, or whether, it is rendered. The console spinner in
``ffdev_setup.ui.progress`` is one implementation; tests use
``NullProgressObserver`` or a recording stub.

Usage::

    from ffdev_setup.core.protocols import ProgressObserver

    async def extract(observer: ProgressObserver) -> None:
        observer.started("Extracting tar.xz file")
        ...
        observer.finished("Extracting tar.xz file", success=True)

"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressObserver(Protocol):
    """Receives lifecycle events of long-running operations."""

    def started(self, title: str) -> None:
        """Handle the start of an operation.

        Args:
            title: Human-readable operation title.

        """
        ...

    def advanced(self, title: str, completed: int, total: int | None) -> None:
        """Handle a progress update of a determinate operation.

        Args:
            title: Operation title as passed to started().
            completed: Units (bytes) completed so far.
            total: Total units, or None when unknown.

        """
        ...

    def finished(self, title: str, *, success: bool) -> None:
        """Handle the end of an operation.

        Args:
            title: Operation title as passed to started().
            success: Whether the operation completed without error.

        """
        ...


class NullProgressObserver:
    """Observer that ignores every event."""

    def started(self, title: str) -> None:
        """Ignore start event."""

    def advanced(self, title: str, completed: int, total: int | None) -> None:
        """Ignore progress event."""

    def finished(self, title: str, *, success: bool) -> None:
        """Ignore finish event."""
