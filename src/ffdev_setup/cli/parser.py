"""CLI argument parser for ffdev-setup.

The only positional argument selects the action. ``uninstall`` removes
the browser; anything else, including unknown options, falls back to
installing.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from ffdev_setup.logger import get_logger

logger = get_logger(__name__)

UNINSTALL_ACTION = "uninstall"
INSTALL_ACTION = "install"


class CLIParser:
    """Command-line argument parser for ffdev-setup."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name (defaults to
                sys.argv[1:])

        Returns:
            Namespace with ``action``, ``verbose`` and ``version``

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        args, extra = parser.parse_known_args(argv)
        if extra:
            logger.debug("Ignoring extra arguments: %s", " ".join(extra))

        if args.action != UNINSTALL_ACTION:
            if args.action is not None:
                logger.debug("Ignoring unknown action: %s", args.action)
            args.action = INSTALL_ACTION
        return args

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="ffdev-setup",
            description="Firefox Developer Edition installer",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Download and install (or reinstall) Firefox Developer Edition
  %(prog)s

  # Remove the installation, shortcut, symlink and ~/.mozilla
  %(prog)s uninstall
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add the action positional and global flags."""
        parser.add_argument(
            "action",
            nargs="?",
            default=None,
            help="'uninstall' to remove; anything else installs",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output on the console",
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show ffdev-setup version and exit",
        )
