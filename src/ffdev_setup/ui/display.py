"""Display functions for install and uninstall results.

Uses the logger for output so messages also reach the log file.
"""

from ffdev_setup.config import InstallLayout
from ffdev_setup.constants import APP_DISPLAY_NAME, CLI_COMMAND_NAME
from ffdev_setup.core.pipeline import PipelineReport
from ffdev_setup.core.uninstall import UninstallOutcome, UninstallResult
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)


def display_install_summary(
    report: PipelineReport, layout: InstallLayout
) -> None:
    """Display the outcome of the install workflow.

    Args:
        report: Results of the install pipeline
        layout: Paths the workflow operated on

    """
    if report.aborted:
        failed = next(r for r in report.results if r.fatal)
        logger.info(
            "❌ Installation failed at step '%s' (exit code %d)",
            failed.name,
            report.exit_code,
        )
        return

    for note in report.notes:
        logger.info("ℹ️  %s", note)

    for warning in report.warnings:
        logger.info("⚠️  %s", warning.message)

    logger.info("✅ %s installed to %s", APP_DISPLAY_NAME, layout.install_dir)
    logger.info("✅ Desktop shortcut: %s", layout.desktop_file)
    logger.info(
        "✅ Run it with '%s' (%s)", CLI_COMMAND_NAME, layout.cli_symlink
    )


def display_uninstall_result(result: UninstallResult) -> None:
    """Display results of an uninstall run.

    Args:
        result: Result returned by UninstallService.uninstall()

    """
    if result.outcome is UninstallOutcome.DECLINED:
        logger.info("Uninstall cancelled.")
        return

    if result.outcome is UninstallOutcome.NOTHING_TO_DO:
        logger.info(
            "%s is not installed, nothing to do.", APP_DISPLAY_NAME
        )
        return

    for removal in result.removals:
        if removal.removed:
            logger.info("✅ Removed %s: %s", removal.label, removal.path)
        else:
            logger.info(
                "⚠️  Could not remove %s %s: %s",
                removal.label,
                removal.path,
                removal.error,
            )

    if result.failures:
        logger.info(
            "⚠️  %s uninstalled with %d problem(s)",
            APP_DISPLAY_NAME,
            len(result.failures),
        )
    else:
        logger.info("✅ %s uninstalled", APP_DISPLAY_NAME)
