"""AppArmor policy for the installed browser.

Recent Ubuntu releases restrict unprivileged user namespaces, which the
Firefox content sandbox needs. The profile written here is unconfined
and only grants ``userns`` to the installed binary.
"""

from pathlib import Path

from ffdev_setup.constants import (
    APPARMOR_PROFILE_NAME,
    APPARMOR_PROFILE_TEMPLATE,
    APPARMOR_SERVICE,
)
from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.core.progress import run_with_progress
from ffdev_setup.exceptions import PolicyReloadError, SandboxError
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)


class AppArmorProfile:
    """Renders the AppArmor profile document."""

    def __init__(self, name: str = APPARMOR_PROFILE_NAME) -> None:
        self.name = name

    def render(self, executable: Path) -> str:
        """Return the profile text for ``executable``."""
        return APPARMOR_PROFILE_TEMPLATE.format(
            name=self.name, executable=executable
        )


class SandboxPolicyService:
    """Enables AppArmor and installs and reloads the browser profile."""

    name = "sandbox"

    def __init__(
        self,
        profile: AppArmorProfile | None = None,
        service: str = APPARMOR_SERVICE,
    ) -> None:
        self.profile = profile or AppArmorProfile()
        self.service = service

    async def ensure_service(self, ctx: WorkflowContext) -> None:
        """Enable and start the AppArmor service unless already active.

        Raises:
            SandboxError: If enabling or starting fails

        """
        if await ctx.system.service_is_active(self.service):
            logger.debug("%s service is already active", self.service)
            return

        session = await ctx.require_session()
        for action in ("enable", "start"):
            result = await ctx.system.manage_service(
                session, action, self.service
            )
            if not result.ok:
                raise SandboxError(result.describe(), self.service)
        logger.info("Started %s service", self.service)

    async def write_profile(self, ctx: WorkflowContext) -> None:
        """Write the rendered profile to its system location.

        Raises:
            SandboxError: If the privileged write fails

        """
        session = await ctx.require_session()
        target = ctx.layout.apparmor_profile
        content = self.profile.render(ctx.layout.executable)
        result = await ctx.system.write_file(
            target, content, session=session
        )
        if not result.ok:
            raise SandboxError(result.describe(), str(target))
        logger.debug("Wrote AppArmor profile %s", target)

    async def reload_profile(self, ctx: WorkflowContext) -> None:
        """Load the profile into the kernel.

        Raises:
            PolicyReloadError: If apparmor_parser rejects it (non-fatal)

        """
        session = await ctx.require_session()
        target = ctx.layout.apparmor_profile
        result = await run_with_progress(
            "Applying AppArmor profile",
            ctx.system.run_privileged(
                session, ["apparmor_parser", "-r", str(target)]
            ),
            ctx.observer,
        )
        if not result.ok:
            raise PolicyReloadError(result.describe(), str(target))
        logger.info("AppArmor profile applied")

    async def run(self, ctx: WorkflowContext) -> None:
        """Service, profile write, reload; in that order."""
        await self.ensure_service(ctx)
        await self.write_profile(ctx)
        await self.reload_profile(ctx)
