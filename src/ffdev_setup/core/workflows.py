"""Composition of the install and uninstall workflows."""

from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.core.dependencies import DependencyChecker
from ffdev_setup.core.install import ArchiveDownloader, ArchiveInstaller
from ffdev_setup.core.integration import IntegrationService
from ffdev_setup.core.pipeline import Pipeline, PipelineReport
from ffdev_setup.core.sandbox import SandboxPolicyService
from ffdev_setup.core.uninstall import (
    ConfirmPrompt,
    UninstallResult,
    UninstallService,
)
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)


def build_install_pipeline() -> Pipeline:
    """Return the install steps in execution order."""
    return Pipeline(
        [
            DependencyChecker(),
            ArchiveDownloader(),
            ArchiveInstaller(),
            IntegrationService(),
            SandboxPolicyService(),
        ]
    )


async def run_install(ctx: WorkflowContext) -> PipelineReport:
    """Run the full install workflow."""
    report = await build_install_pipeline().run(ctx)
    if report.aborted:
        logger.debug("Install aborted with exit code %d", report.exit_code)
    return report


async def run_uninstall(
    ctx: WorkflowContext, confirm: ConfirmPrompt
) -> UninstallResult:
    """Run the uninstall workflow."""
    return await UninstallService(confirm).uninstall(ctx)
