"""Shared state handed to every workflow step."""

from dataclasses import dataclass, field

from ffdev_setup.config import InstallLayout
from ffdev_setup.core.privilege import Authenticator, PrivilegedSession
from ffdev_setup.core.protocols import (
    NullProgressObserver,
    ProgressObserver,
    SystemOperations,
)


@dataclass
class WorkflowContext:
    """Dependencies and the lazily-acquired privileged session of a run.

    The session is created by the first step that needs privilege and
    reused by every later step, so the user is prompted at most once.
    """

    layout: InstallLayout
    system: SystemOperations
    authenticator: Authenticator
    observer: ProgressObserver = field(default_factory=NullProgressObserver)
    _session: PrivilegedSession | None = field(default=None, repr=False)

    @property
    def has_session(self) -> bool:
        """Whether a validated credential was already obtained."""
        return self._session is not None

    async def require_session(self) -> PrivilegedSession:
        """Return the validated session, authenticating on first use."""
        if self._session is None:
            self._session = await self.authenticator.authenticate()
        return self._session
