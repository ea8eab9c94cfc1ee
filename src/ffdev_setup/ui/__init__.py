"""UI module for prompts, progress and result display."""

from ffdev_setup.ui.display import (
    display_install_summary,
    display_uninstall_result,
)
from ffdev_setup.ui.progress import SpinnerObserver
from ffdev_setup.ui.prompts import confirm, prompt_secret

__all__ = [
    "SpinnerObserver",
    "confirm",
    "display_install_summary",
    "display_uninstall_result",
    "prompt_secret",
]
