"""Protocols decoupling workflow logic from UI and host implementations."""

from ffdev_setup.core.protocols.progress import (
    NullProgressObserver,
    ProgressObserver,
)
from ffdev_setup.core.protocols.system import CommandResult, SystemOperations

__all__ = [
    "CommandResult",
    "NullProgressObserver",
    "ProgressObserver",
    "SystemOperations",
]
