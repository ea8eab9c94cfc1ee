"""Main CLI entry point for ffdev-setup.

Keeps the entry point minimal and delegates everything to the CLI
runner.
"""

import sys

import uvloop

from ffdev_setup.cli import CLIRunner
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)

EXIT_UNEXPECTED = 1
EXIT_INTERRUPTED = 130


async def async_main() -> int:
    """Run the CLI asynchronously and return the exit status."""
    logger.debug("CLI started")
    runner = CLIRunner()
    exit_code = await runner.run()
    logger.debug("CLI finished with exit code %d", exit_code)
    return exit_code


def main() -> None:
    """Run the CLI application on uvloop.

    Exits with the workflow's status, 130 on Ctrl+C and 1 on any
    unexpected error.
    """
    try:
        exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        print()
        logger.info("⏹️  Operation cancelled by user")
        sys.exit(EXIT_INTERRUPTED)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(EXIT_UNEXPECTED)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
