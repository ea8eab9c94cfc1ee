"""Exception classes for ffdev-setup operations."""

from enum import Enum


class FailureKind(Enum):
    """Distinguishable failure kinds with their fatality and exit code."""

    DEPENDENCY = ("dependency", True, 2)
    DOWNLOAD = ("download", True, 3)
    EXTRACTION = ("extraction", True, 4)
    INSTALLATION = ("installation", True, 5)
    INTEGRATION = ("integration", True, 6)
    SANDBOX = ("sandbox", True, 7)
    POLICY_RELOAD = ("policy-reload", False, 0)

    def __init__(
        self,
        label: str,
        fatal: bool,  # noqa: FBT001
        exit_code: int,
    ) -> None:
        self.label = label
        self.fatal = fatal
        self.exit_code = exit_code


class FfdevSetupError(Exception):
    """Base exception for ffdev-setup operations."""

    error_prefix: str = "Operation failed"
    kind: FailureKind | None = None

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path or name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class DependencyError(FfdevSetupError):
    """Raised when missing tools cannot be installed."""

    error_prefix = "Dependency installation failed"
    kind = FailureKind.DEPENDENCY


class DownloadError(FfdevSetupError):
    """Raised when the release archive cannot be downloaded."""

    error_prefix = "Download failed"
    kind = FailureKind.DOWNLOAD


class ExtractionError(FfdevSetupError):
    """Raised when the archive cannot be extracted."""

    error_prefix = "Extraction failed"
    kind = FailureKind.EXTRACTION


class InstallationError(FfdevSetupError):
    """Raised when preparing the install directory fails."""

    error_prefix = "Installation failed"
    kind = FailureKind.INSTALLATION


class IntegrationError(FfdevSetupError):
    """Raised when the launcher or CLI symlink cannot be created."""

    error_prefix = "Desktop integration failed"
    kind = FailureKind.INTEGRATION


class SandboxError(FfdevSetupError):
    """Raised when the AppArmor profile cannot be installed."""

    error_prefix = "Sandbox setup failed"
    kind = FailureKind.SANDBOX


class PolicyReloadError(FfdevSetupError):
    """Raised when AppArmor refuses to reload the profile."""

    error_prefix = "Couldn't apply AppArmor profile"
    kind = FailureKind.POLICY_RELOAD


class ConfigurationError(FfdevSetupError):
    """Raised when the settings file holds invalid values."""

    error_prefix = "Invalid configuration"
