"""Privileged session handling.

A ``PrivilegedSession`` is only ever produced by ``Authenticator`` after
the credential passed a no-op ``sudo`` check, and it is then handed to
every privileged operation explicitly. Nothing here writes the secret to
disk or logs it.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ffdev_setup.constants import PASSWORD_PROMPT
from ffdev_setup.logger import get_logger

if TYPE_CHECKING:
    from ffdev_setup.core.protocols import SystemOperations

logger = get_logger(__name__)

SecretPrompt = Callable[[str], str]


@dataclass(frozen=True)
class PrivilegedSession:
    """A validated administrator credential for the process lifetime.

    Attributes:
        secret: The sudo password, or None when already running as root.

    """

    secret: str | None = field(repr=False)

    @property
    def is_root(self) -> bool:
        """Whether commands run directly, without sudo."""
        return self.secret is None

    def stdin_payload(self) -> bytes | None:
        """Bytes fed to ``sudo -S`` on stdin."""
        if self.secret is None:
            return None
        return f"{self.secret}\n".encode()

    def __repr__(self) -> str:
        """Represent the session without revealing the secret."""
        return f"PrivilegedSession(is_root={self.is_root})"


class Authenticator:
    """Obtains a validated ``PrivilegedSession``.

    The prompt is repeated until the credential validates; there is no
    attempt limit.
    """

    def __init__(
        self,
        system: SystemOperations,
        prompt: SecretPrompt,
        *,
        is_root: Callable[[], bool] | None = None,
    ) -> None:
        """Initialize the authenticator.

        Args:
            system: Host operations used to validate the credential
            prompt: Secret-masked input function, called with the prompt text
            is_root: Override for root detection (defaults to euid check)

        """
        self.system = system
        self.prompt = prompt
        self._is_root = is_root or (lambda: os.geteuid() == 0)

    async def authenticate(self) -> PrivilegedSession:
        """Prompt until the privilege-escalation check accepts a secret.

        Returns:
            A session holding the credential that passed validation

        """
        if self._is_root():
            logger.debug("Running as root; sudo is not needed")
            return PrivilegedSession(secret=None)

        attempt = 0
        while True:
            attempt += 1
            secret = self.prompt(PASSWORD_PROMPT)
            if await self.system.check_credential(secret):
                logger.debug("sudo credential accepted (attempt %d)", attempt)
                return PrivilegedSession(secret=secret)
            logger.error("Incorrect password. Try again.")
