import subprocess
from typing import Callable

import pytest

from gas_report import ReportConfig, get_report_config


@pytest.fixture
def config() -> ReportConfig:
    """The config bundled with the package."""
    return get_report_config()


@pytest.fixture
def fake_forge(monkeypatch) -> Callable:
    """Replaces subprocess.run with a fake forge.

    Returns a function that installs a handler. The handler receives the command
    and working directory and returns (returncode, stdout). Every call is
    recorded in the returned list.
    """

    def install(handler: Callable[[list[str], str], tuple[int, str]]) -> list[list[str]]:
        calls: list[list[str]] = []

        def run(command, cwd=None, capture_output=False, text=False, check=False):
            calls.append(command)
            returncode, stdout = handler(command, cwd)
            if check and returncode != 0:
                raise subprocess.CalledProcessError(returncode, command, output=stdout, stderr="compilation failed")
            return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr="")

        monkeypatch.setattr(subprocess, "run", run)
        return calls

    return install
