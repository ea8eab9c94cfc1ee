"""Dependency checking and automatic installation of missing tools.

Every required tool is looked up on PATH. Missing ones are installed with
the first supported package manager found, after the privileged session
has been obtained. The version of one tool is compared against a
requirement, and a mismatch only produces a warning.
"""

import re
from dataclasses import dataclass, field

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from ffdev_setup.constants import (
    PACKAGE_MANAGERS,
    REQUIRED_TOOLS,
    VERSION_CHECKED_TOOL,
    VERSION_REQUIREMENT,
)
from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.core.progress import run_with_progress
from ffdev_setup.core.protocols import SystemOperations
from ffdev_setup.exceptions import DependencyError
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)

_VERSION_PATTERN = re.compile(r"\d+(?:\.\d+)+")


def parse_version_output(output: str) -> Version | None:
    """Extract the first dotted version number from ``--version`` output.

    Args:
        output: Raw text printed by the tool

    Returns:
        Parsed version, or None when no dotted number is present

    """
    match = _VERSION_PATTERN.search(output)
    if match is None:
        return None
    try:
        return Version(match.group(0))
    except InvalidVersion:
        return None


@dataclass
class DependencyReport:
    """What the dependency check found and did."""

    missing: list[str] = field(default_factory=list)
    installed: list[str] = field(default_factory=list)
    package_manager: str | None = None
    version_warning: str | None = None

    def summary_lines(self) -> list[str]:
        """Lines for the install summary; empty when nothing happened."""
        lines: list[str] = []
        if self.installed:
            lines.append(
                f"Installed with {self.package_manager}: "
                f"{' '.join(self.installed)}"
            )
        if self.version_warning:
            lines.append(self.version_warning)
        return lines


class DependencyChecker:
    """Ensures every external tool the workflow calls is available."""

    name = "dependencies"

    def __init__(
        self,
        tools: dict[str, dict[str, str]] | None = None,
        version_tool: str = VERSION_CHECKED_TOOL,
        version_requirement: str = VERSION_REQUIREMENT,
    ) -> None:
        """Initialize the checker.

        Args:
            tools: Tool name -> package name per package manager
            version_tool: Tool whose version is compared
            version_requirement: PEP 440 specifier the version must satisfy

        """
        self.tools = tools if tools is not None else REQUIRED_TOOLS
        self.version_tool = version_tool
        self.version_requirement = version_requirement

    def find_missing(self, system: SystemOperations) -> list[str]:
        """Return the required tools absent from PATH, in list order."""
        return [tool for tool in self.tools if system.which(tool) is None]

    @staticmethod
    def detect_package_manager(system: SystemOperations) -> str | None:
        """Return the first supported package manager on PATH."""
        for manager in PACKAGE_MANAGERS:
            if system.which(manager) is not None:
                return manager
        return None

    def packages_for(self, tools: list[str], manager: str) -> list[str]:
        """Map tool names to package names for ``manager``."""
        packages: list[str] = []
        for tool in tools:
            package = self.tools.get(tool, {}).get(manager, tool)
            if package not in packages:
                packages.append(package)
        return packages

    async def check_version(self, system: SystemOperations) -> str | None:
        """Compare the checked tool's version against the requirement.

        Returns:
            A warning message on mismatch, None when the version satisfies
            the requirement or the tool is absent

        """
        if system.which(self.version_tool) is None:
            return None

        result = await system.run([self.version_tool, "--version"])
        version = parse_version_output(result.stdout or result.stderr)
        try:
            specifier = SpecifierSet(self.version_requirement)
        except InvalidSpecifier:
            logger.debug(
                "Ignoring invalid version requirement: %s",
                self.version_requirement,
            )
            return None

        if version is None:
            return (
                f"Could not determine {self.version_tool} version; "
                f"required {self.version_requirement}"
            )
        if version not in specifier:
            return (
                f"{self.version_tool} {version} found but "
                f"{self.version_requirement} is required"
            )
        logger.debug(
            "%s %s satisfies %s",
            self.version_tool,
            version,
            self.version_requirement,
        )
        return None

    async def install_missing(
        self, ctx: WorkflowContext, missing: list[str]
    ) -> DependencyReport:
        """Install ``missing`` tools with the detected package manager.

        Raises:
            DependencyError: If no package manager is available or the
                refresh or install command fails

        """
        report = DependencyReport(missing=list(missing))
        manager = self.detect_package_manager(ctx.system)
        if manager is None:
            raise DependencyError(
                "no supported package manager found "
                f"({', '.join(PACKAGE_MANAGERS)})",
                ", ".join(missing),
            )
        report.package_manager = manager

        session = await ctx.require_session()
        refresh, install = PACKAGE_MANAGERS[manager]
        packages = self.packages_for(missing, manager)

        logger.info("Installing missing dependencies: %s", " ".join(packages))
        result = await run_with_progress(
            "Updating package index",
            ctx.system.run_privileged(session, list(refresh)),
            ctx.observer,
        )
        if not result.ok:
            raise DependencyError(result.describe(), manager)

        result = await run_with_progress(
            "Installing dependencies",
            ctx.system.run_privileged(session, [*install, *packages]),
            ctx.observer,
        )
        if not result.ok:
            raise DependencyError(result.describe(), " ".join(packages))

        report.installed = packages
        return report

    async def run(self, ctx: WorkflowContext) -> list[str]:
        """Check tools, install the missing ones and verify the version.

        Returns:
            Summary lines naming installed packages and any version
            warning

        """
        logger.info("Checking dependencies...")
        missing = self.find_missing(ctx.system)
        if missing:
            logger.debug("Missing tools: %s", ", ".join(missing))
            report = await self.install_missing(ctx, missing)
        else:
            logger.debug("All required tools are present")
            report = DependencyReport()

        report.version_warning = await self.check_version(ctx.system)
        if report.version_warning:
            logger.warning("%s", report.version_warning)
        return report.summary_lines()
