"""Exceptions raised while generating gas reports."""

from typing import Sequence


class GasReportError(Exception):
    """Base class for gas report errors."""


class ForgeCommandError(GasReportError):
    """The forge process could not be started or exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int | None = None, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"`{' '.join(self.command)}` failed with return code {returncode}")


class GasReportParseError(GasReportError):
    """Forge output did not have the expected shape."""
