"""Error types raised by the n00format setup flow."""

from __future__ import annotations


class N00FormatError(RuntimeError):
    """Base class for setup failures that should abort the run."""


class ConfigError(N00FormatError):
    """Raised when the setup configuration cannot be loaded or validated."""


class InstallError(N00FormatError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, returncode: int | None) -> None:
        super().__init__(f"Installation failed with code {returncode}")
        self.returncode = returncode


class InstallLaunchError(N00FormatError):
    """Raised when the package manager process cannot be started."""

    def __init__(self, program: str, reason: OSError) -> None:
        super().__init__(f"Unable to launch {program}: {reason}")
        self.program = program
        self.reason = reason
