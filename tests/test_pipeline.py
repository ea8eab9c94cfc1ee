"""Tests for the pipeline runner and the install workflow."""

import pytest

from ffdev_setup.core.pipeline import Pipeline, StepResult
from ffdev_setup.core.workflows import build_install_pipeline, run_install
from ffdev_setup.exceptions import (
    ConfigurationError,
    DownloadError,
    FailureKind,
    PolicyReloadError,
)


class _Step:
    def __init__(self, name, error=None):
        self.name = name
        self.error = error
        self.ran = False

    async def run(self, ctx):
        self.ran = True
        if self.error is not None:
            raise self.error


def test_step_result_flags():
    assert StepResult("a").ok
    assert StepResult("b", FailureKind.SANDBOX).fatal
    warning = StepResult("c", FailureKind.POLICY_RELOAD)
    assert not warning.ok
    assert not warning.fatal


@pytest.mark.asyncio
async def test_fatal_step_stops_pipeline(ctx):
    steps = [
        _Step("first"),
        _Step("download", DownloadError("HTTP 500", "url")),
        _Step("install"),
    ]

    report = await Pipeline(steps).run(ctx)

    assert report.aborted
    assert report.exit_code == 3
    assert [r.name for r in report.results] == ["first", "download"]
    assert not steps[2].ran


@pytest.mark.asyncio
async def test_non_fatal_step_continues(ctx):
    steps = [
        _Step("sandbox", PolicyReloadError("parser error", "profile")),
        _Step("after"),
    ]

    report = await Pipeline(steps).run(ctx)

    assert not report.aborted
    assert report.exit_code == 0
    assert steps[1].ran
    assert [w.name for w in report.warnings] == ["sandbox"]


@pytest.mark.asyncio
async def test_error_without_kind_counts_as_installation(ctx):
    report = await Pipeline(
        [_Step("cfg", ConfigurationError("bad"))]
    ).run(ctx)

    assert report.exit_code == FailureKind.INSTALLATION.exit_code


def test_install_pipeline_order():
    names = [step.name for step in build_install_pipeline().steps]

    assert names == [
        "dependencies",
        "download",
        "install",
        "integration",
        "sandbox",
    ]


@pytest.mark.asyncio
async def test_full_install_succeeds(ctx, layout, fake_system, prompt):
    report = await run_install(ctx)

    assert report.exit_code == 0
    assert all(result.ok for result in report.results)
    assert prompt.calls == 1
    assert layout.executable.exists()
    assert layout.desktop_file.exists()
    assert layout.cli_symlink.is_symlink()
    assert layout.apparmor_profile.exists()


@pytest.mark.asyncio
async def test_download_failure_stops_before_install(ctx, fake_system):
    fake_system.download_error = "connection refused"

    report = await run_install(ctx)

    assert report.exit_code == 3
    assert "extract" not in fake_system.ops()
    assert "remove" not in fake_system.ops()


@pytest.mark.asyncio
async def test_installed_packages_reach_report(ctx, fake_system):
    fake_system.tools.discard("xz")

    report = await run_install(ctx)

    assert report.exit_code == 0
    assert report.notes == ["Installed with apt-get: xz-utils"]
    assert report.results[0].notes == ("Installed with apt-get: xz-utils",)


@pytest.mark.asyncio
async def test_reload_failure_keeps_exit_code_zero(ctx, fake_system):
    fake_system.failures.add("apparmor_parser")

    report = await run_install(ctx)

    assert report.exit_code == 0
    assert [w.name for w in report.warnings] == ["sandbox"]
