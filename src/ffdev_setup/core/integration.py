"""Desktop integration: menu shortcut and command-line symlink."""

from ffdev_setup.constants import DESKTOP_TRUSTED_ATTRIBUTE
from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.core.desktop_entry import DesktopEntry
from ffdev_setup.exceptions import IntegrationError
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)

# The shortcut is marked executable so file managers offer to launch it
SHORTCUT_MODE = 0o755


class IntegrationService:
    """Writes the .desktop shortcut and links the CLI command."""

    name = "integration"

    async def write_shortcut(self, ctx: WorkflowContext) -> None:
        """Write the per-user .desktop file and mark it trusted.

        Raises:
            IntegrationError: If the file cannot be written

        """
        layout = ctx.layout
        content = DesktopEntry(
            layout.executable, layout.icon
        ).generate_desktop_content()

        result = await ctx.system.write_file(
            layout.desktop_file, content, mode=SHORTCUT_MODE
        )
        if not result.ok:
            raise IntegrationError(result.describe(), str(layout.desktop_file))
        logger.info("Created desktop shortcut: %s", layout.desktop_file)

        await self._mark_trusted(ctx)
        await self._refresh_desktop_database(ctx)

    async def _mark_trusted(self, ctx: WorkflowContext) -> None:
        if ctx.system.which("gio") is None:
            logger.debug("gio not available; skipping trusted flag")
            return
        result = await ctx.system.run(
            [
                "gio",
                "set",
                str(ctx.layout.desktop_file),
                DESKTOP_TRUSTED_ATTRIBUTE,
                "true",
            ]
        )
        if not result.ok:
            logger.debug("Ignoring gio failure: %s", result.describe())

    async def _refresh_desktop_database(self, ctx: WorkflowContext) -> None:
        if ctx.system.which("update-desktop-database") is None:
            logger.debug("update-desktop-database not available")
            return
        result = await ctx.system.run(
            [
                "update-desktop-database",
                str(ctx.layout.desktop_file.parent),
            ]
        )
        if not result.ok:
            logger.debug(
                "Desktop database refresh failed: %s", result.describe()
            )

    async def link_command(self, ctx: WorkflowContext) -> None:
        """Create or replace the CLI symlink to the browser binary.

        Raises:
            IntegrationError: If the symlink cannot be created

        """
        session = await ctx.require_session()
        link = ctx.layout.cli_symlink
        result = await ctx.system.symlink(
            session, ctx.layout.executable, link
        )
        if not result.ok:
            raise IntegrationError(result.describe(), str(link))
        logger.info("Linked %s -> %s", link, ctx.layout.executable)

    async def run(self, ctx: WorkflowContext) -> None:
        """Create the shortcut, then the symlink."""
        await self.write_shortcut(ctx)
        await self.link_command(ctx)
