"""Command-line interface: argument parsing and workflow routing."""

from ffdev_setup.cli.parser import CLIParser
from ffdev_setup.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
