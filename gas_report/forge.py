"""Runs forge against the gas comparison tests."""

import logging
import subprocess
from pathlib import Path

from gas_report.config import ReportConfig
from gas_report.errors import ForgeCommandError


def _run(command: list[str], root: Path | str) -> str:
    logging.info(f"Running `{' '.join(command)}` in {root}")
    try:
        completed = subprocess.run(command, cwd=root, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as e:
        raise ForgeCommandError(command, e.returncode, e.stderr or "") from e
    except OSError as e:
        # forge is missing or not executable.
        raise ForgeCommandError(command, None, str(e)) from e
    return completed.stdout


def run_forge_snapshot(config: ReportConfig, root: Path | str) -> None:
    """Runs `forge snapshot`, which writes the snapshot file into the project root.

    Parameters
    ----------
    config : ReportConfig
        The report configuration.
    root : Path | str
        The foundry project directory to run forge in.
    """
    _run([config.forge_binary, "snapshot", "--match-path", config.match_path], root)


def run_forge_test_json(config: ReportConfig, root: Path | str) -> str:
    """Runs `forge test --json` and returns everything it wrote to stdout.

    Parameters
    ----------
    config : ReportConfig
        The report configuration.
    root : Path | str
        The foundry project directory to run forge in.

    Returns
    -------
    str
        The captured stdout. The test report is the line that starts with `{`.
    """
    return _run([config.forge_binary, "test", "--match-path", config.match_path, "--json"], root)
