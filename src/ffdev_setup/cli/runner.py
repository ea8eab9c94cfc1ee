"""CLI runner for ffdev-setup.

Loads configuration, wires the host implementation into a workflow
context and routes to the install or uninstall workflow.
"""

from argparse import Namespace
from collections.abc import Sequence

from ffdev_setup import __version__
from ffdev_setup.cli.parser import UNINSTALL_ACTION, CLIParser
from ffdev_setup.config import ConfigManager, GlobalConfig, InstallLayout
from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.core.privilege import Authenticator
from ffdev_setup.core.protocols import ProgressObserver, SystemOperations
from ffdev_setup.core.system import HostSystem
from ffdev_setup.core.uninstall import ConfirmPrompt
from ffdev_setup.core.workflows import run_install, run_uninstall
from ffdev_setup.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)
from ffdev_setup.ui import (
    SpinnerObserver,
    confirm,
    display_install_summary,
    display_uninstall_result,
    prompt_secret,
)

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        layout: InstallLayout | None = None,
        system: SystemOperations | None = None,
        observer: ProgressObserver | None = None,
        confirm_prompt: ConfirmPrompt = confirm,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Settings loader (default: ~/.config location)
            layout: Install locations (default: the fixed locations)
            system: Host operations (default: HostSystem)
            observer: Progress observer (default: console spinner)
            confirm_prompt: Yes/no prompt used by uninstall

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config: GlobalConfig | None = None
        self.layout = layout
        self.system = system
        self.observer = observer or SpinnerObserver()
        self.confirm_prompt = confirm_prompt

    def load_config(self) -> None:
        """Load settings, apply their log levels and fill in defaults.

        Called after argument parsing so flags that exit early never
        create the settings file.
        """
        if self.global_config is not None:
            return
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)

        if self.layout is None:
            self.layout = InstallLayout.from_config(self.global_config)
        if self.system is None:
            self.system = HostSystem(
                self.global_config["network"]["timeout_seconds"]
            )

    def create_context(self) -> WorkflowContext:
        """Build the workflow context for one run."""
        self.load_config()
        return WorkflowContext(
            layout=self.layout,
            system=self.system,
            authenticator=Authenticator(self.system, prompt_secret),
            observer=self.observer,
        )

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Returns:
            Process exit status

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        self.load_config()
        if args.verbose:
            set_console_level("DEBUG")

        return await self._execute_command(args)

    async def _execute_command(self, args: Namespace) -> int:
        ctx = self.create_context()

        if args.action == UNINSTALL_ACTION:
            result = await run_uninstall(ctx, self.confirm_prompt)
            display_uninstall_result(result)
            return 0 if result.success else 1

        report = await run_install(ctx)
        display_install_summary(report, self.layout)
        return report.exit_code
