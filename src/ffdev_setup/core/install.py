"""Acquisition and installation of the release archive.

``ArchiveDownloader`` fetches the archive to a fixed location and
``ArchiveInstaller`` replaces the install directory with its contents.
Both are pipeline steps.
"""

from pathlib import Path

from ffdev_setup.constants import INSTALL_PERMISSIONS
from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.core.progress import run_with_progress
from ffdev_setup.exceptions import (
    DownloadError,
    ExtractionError,
    InstallationError,
)
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)


class ArchiveDownloader:
    """Downloads the release archive, replacing any previous copy."""

    name = "download"

    async def run(self, ctx: WorkflowContext) -> None:
        """Prepare the destination and stream the archive into it.

        Raises:
            DownloadError: If the destination cannot be prepared or the
                transfer fails

        """
        archive: Path = ctx.layout.archive
        try:
            archive.parent.mkdir(parents=True, exist_ok=True)
            archive.unlink(missing_ok=True)
        except OSError as e:
            raise DownloadError(str(e), str(archive)) from e

        await run_with_progress(
            f"Downloading {archive.name}",
            ctx.system.download(
                ctx.layout.download_url, archive, ctx.observer
            ),
            ctx.observer,
        )
        logger.debug("Archive saved to %s", archive)


class ArchiveInstaller:
    """Replaces the install directory with the extracted archive."""

    name = "install"

    def __init__(self, permissions: str = INSTALL_PERMISSIONS) -> None:
        """Initialize the installer.

        Args:
            permissions: Symbolic mode applied recursively after extraction

        """
        self.permissions = permissions

    async def run(self, ctx: WorkflowContext) -> None:
        """Delete, recreate, extract into and open up the install dir.

        Raises:
            InstallationError: If removing, creating or chmod-ing fails
            ExtractionError: If tar fails

        """
        session = await ctx.require_session()
        system = ctx.system
        target = ctx.layout.install_dir

        logger.debug("Removing previous installation at %s", target)
        result = await system.remove_path(target, session=session)
        if not result.ok:
            raise InstallationError(result.describe(), str(target))

        result = await system.make_directory(session, target)
        if not result.ok:
            raise InstallationError(result.describe(), str(target))

        result = await run_with_progress(
            "Extracting tar.xz file",
            system.extract_archive(session, ctx.layout.archive, target),
            ctx.observer,
        )
        if not result.ok:
            raise ExtractionError(result.describe(), str(ctx.layout.archive))

        result = await system.set_permissions(
            session, target, self.permissions
        )
        if not result.ok:
            raise InstallationError(result.describe(), str(target))
        logger.info("Installed to %s", target)
