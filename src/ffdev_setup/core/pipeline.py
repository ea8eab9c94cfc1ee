"""Ordered pipeline of typed workflow steps.

Each step either completes or raises an ``FfdevSetupError`` carrying a
``FailureKind``. The runner turns outcomes into ``StepResult`` values,
stops at the first fatal kind and carries on past non-fatal ones (the
AppArmor reload is the only non-fatal failure today).
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ffdev_setup.core.context import WorkflowContext
from ffdev_setup.exceptions import FailureKind, FfdevSetupError
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)


class Step(Protocol):
    """A single stage of the install workflow."""

    name: str

    async def run(self, ctx: WorkflowContext) -> list[str] | None:
        """Perform the step and return optional summary lines.

        Raises FfdevSetupError on failure.
        """
        ...


@dataclass(frozen=True)
class StepResult:
    """Outcome of one step."""

    name: str
    kind: FailureKind | None = None
    message: str = ""
    notes: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Whether the step completed without any failure."""
        return self.kind is None

    @property
    def fatal(self) -> bool:
        """Whether the failure stops the pipeline."""
        return self.kind is not None and self.kind.fatal


@dataclass
class PipelineReport:
    """Results of a pipeline run, in execution order."""

    results: list[StepResult] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        """Whether a fatal failure stopped the run."""
        return any(result.fatal for result in self.results)

    @property
    def notes(self) -> list[str]:
        """Summary lines reported by completed steps, in order."""
        return [note for result in self.results for note in result.notes]

    @property
    def warnings(self) -> list[StepResult]:
        """Non-fatal failures that were reported but tolerated."""
        return [r for r in self.results if not r.ok and not r.fatal]

    @property
    def exit_code(self) -> int:
        """Process exit status: the first fatal kind's code, else 0."""
        for result in self.results:
            if result.fatal and result.kind is not None:
                return result.kind.exit_code
        return 0


class Pipeline:
    """Runs steps in order until one fails fatally."""

    def __init__(self, steps: Sequence[Step]) -> None:
        """Initialize the pipeline.

        Args:
            steps: Steps to execute, in order

        """
        self.steps = list(steps)

    async def run(self, ctx: WorkflowContext) -> PipelineReport:
        """Execute every step, aborting on the first fatal failure.

        Args:
            ctx: Shared workflow context

        Returns:
            Report with one result per executed step

        """
        report = PipelineReport()
        for step in self.steps:
            logger.debug("Starting step: %s", step.name)
            try:
                notes = await step.run(ctx)
            except FfdevSetupError as e:
                kind = e.kind or FailureKind.INSTALLATION
                result = StepResult(step.name, kind, str(e))
                report.results.append(result)
                if result.fatal:
                    logger.error("%s", e)
                    logger.debug("Aborting pipeline at step %s", step.name)
                    break
                logger.error("%s", e)
                continue

            report.results.append(
                StepResult(step.name, notes=tuple(notes or ()))
            )
        return report
