"""UninstallService: removes every installed artifact after confirmation.

The flow is confirm, then detect, then execute. Declining or having
nothing installed ends successfully without touching the filesystem.
Each removal is independent: a failure is logged and recorded, and the
remaining artifacts are still attempted.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ffdev_setup.constants import APP_DISPLAY_NAME
from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)

ConfirmPrompt = Callable[[str], bool]


def uninstall_question(user_data_dir: Path) -> str:
    """Confirmation question naming the user data directory to delete."""
    return (
        "This will remove the installation, desktop launcher, command "
        f"symlink and your entire {user_data_dir} directory.\n"
        f"Are you sure you want to uninstall {APP_DISPLAY_NAME}? [y/N]: "
    )


class UninstallOutcome(Enum):
    """Terminal state of an uninstall run."""

    DECLINED = "declined"
    NOTHING_TO_DO = "nothing-to-do"
    COMPLETED = "completed"


@dataclass
class ArtifactRemoval:
    """Result of removing one artifact."""

    label: str
    path: Path
    removed: bool
    error: str | None = None


@dataclass
class UninstallResult:
    """Outcome of the uninstall flow.

    ``success`` is always true: declining, finding nothing and partial
    removal all end the process normally.
    """

    outcome: UninstallOutcome
    detected: dict[str, bool] = field(default_factory=dict)
    removals: list[ArtifactRemoval] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether the process should exit with status 0."""
        return True

    @property
    def failures(self) -> list[ArtifactRemoval]:
        """Removals that did not succeed."""
        return [r for r in self.removals if not r.removed]


class UninstallService:
    """Detects and removes the browser's installed artifacts."""

    def __init__(self, confirm: ConfirmPrompt) -> None:
        """Initialize the service.

        Args:
            confirm: Asks a yes/no question; True means proceed

        """
        self.confirm = confirm

    @staticmethod
    def detect(ctx: WorkflowContext) -> dict[str, bool]:
        """Report which artifacts are present.

        The CLI symlink counts as present even when it dangles.
        """
        layout = ctx.layout
        link = layout.cli_symlink
        return {
            "install_dir": layout.install_dir.exists(),
            "desktop_file": layout.desktop_file.exists(),
            "cli_symlink": link.is_symlink() or link.exists(),
            "user_data_dir": layout.user_data_dir.exists(),
        }

    async def _remove(
        self,
        ctx: WorkflowContext,
        label: str,
        path: Path,
        *,
        privileged: bool,
    ) -> ArtifactRemoval:
        session = await ctx.require_session() if privileged else None
        result = await ctx.system.remove_path(path, session=session)
        if result.ok:
            logger.debug("Removed %s: %s", label, path)
            return ArtifactRemoval(label, path, removed=True)
        logger.warning(
            "Failed to remove %s %s: %s", label, path, result.describe()
        )
        return ArtifactRemoval(label, path, False, result.describe())

    async def execute(
        self, ctx: WorkflowContext, detected: dict[str, bool]
    ) -> list[ArtifactRemoval]:
        """Remove the artifacts, each independently and best-effort."""
        layout = ctx.layout
        await ctx.require_session()

        targets = [
            ("install directory", layout.install_dir, True),
            ("desktop shortcut", layout.desktop_file, False),
            ("command symlink", layout.cli_symlink, True),
        ]
        if detected.get("user_data_dir"):
            targets.append(
                ("user data directory", layout.user_data_dir, False)
            )

        return [
            await self._remove(ctx, label, path, privileged=privileged)
            for label, path, privileged in targets
        ]

    async def uninstall(self, ctx: WorkflowContext) -> UninstallResult:
        """Run confirm, detect and execute.

        Returns:
            UninstallResult describing what happened

        """
        question = uninstall_question(ctx.layout.user_data_dir)
        if not self.confirm(question):
            logger.debug("Uninstall declined")
            return UninstallResult(UninstallOutcome.DECLINED)

        detected = self.detect(ctx)
        if not any(detected.values()):
            return UninstallResult(UninstallOutcome.NOTHING_TO_DO, detected)

        removals = await self.execute(ctx, detected)
        return UninstallResult(
            UninstallOutcome.COMPLETED, detected, removals
        )
