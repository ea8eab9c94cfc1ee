"""Interactive prompts."""

import getpass

from ffdev_setup.constants import AFFIRMATIVE_ANSWERS
from ffdev_setup.logger import flush_all_handlers


def prompt_secret(prompt: str) -> str:
    """Read a secret without echoing it.

    Pending log records are flushed first so the prompt is not
    interleaved with queued console output.

    Raises:
        EOFError: If input is closed

    """
    flush_all_handlers()
    return getpass.getpass(prompt=prompt)


def is_affirmative(answer: str) -> bool:
    """Whether ``answer`` means yes (``y`` or ``yes``, any case)."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def confirm(question: str) -> bool:
    """Ask a yes/no question; EOF counts as no."""
    flush_all_handlers()
    try:
        answer = input(question)
    except EOFError:
        print()
        return False
    return is_affirmative(answer)
