"""Run-with-progress wrapper.

Wraps any awaitable so the observer sees matching started/finished
events. The observer never influences the result: exceptions propagate
unchanged and return values pass straight through.
"""

from collections.abc import Awaitable
from typing import TypeVar

from ffdev_setup.core.protocols import ProgressObserver

T = TypeVar("T")


async def run_with_progress(
    title: str,
    operation: Awaitable[T],
    observer: ProgressObserver,
) -> T:
    """Await ``operation`` while reporting it to ``observer``.

    Args:
        title: Human-readable title, e.g. "Extracting tar.xz file"
        operation: The awaitable doing the actual work
        observer: Receives started/finished events

    Returns:
        Whatever ``operation`` returns

    """
    observer.started(title)
    try:
        result = await operation
    except BaseException:
        observer.finished(title, success=False)
        raise
    # CommandResult-like values carry an exit status worth displaying
    observer.finished(title, success=bool(getattr(result, "ok", True)))
    return result
