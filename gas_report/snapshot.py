"""Parses the `.gas-snapshot` file written by `forge snapshot`.

Each line looks like this:

    HashMapGasTest:test_writeSingleKey() (gas: 21000)

The contract name, test name and gas amount are matched independently
against the whole line. A line that is missing any of them is an error.
"""

import re
from pathlib import Path
from typing import NamedTuple

from gas_report.config import ReportConfig
from gas_report.errors import GasReportParseError
from gas_report.results import GasResults

TEST_NAME = re.compile(r":(.*?)\(")
GAS_AMOUNT = re.compile(r"gas: (\d+)")


class SnapshotRecord(NamedTuple):
    """A single line of the snapshot file."""

    contract: str
    test: str
    gas: int


def _match(pattern: re.Pattern, line: str, what: str) -> str:
    match = pattern.search(line)
    if match is None:
        raise GasReportParseError(f"No {what} found in snapshot line: {line!r}")
    return match.group(1)


def parse_snapshot_line(line: str, contract_suffix: str = "GasTest") -> SnapshotRecord:
    """Extracts the contract variant, test name and gas amount from a snapshot line.

    Parameters
    ----------
    line : str
        A line from the snapshot file.
    contract_suffix : str, optional
        The suffix that follows the variant name in the test contract name.

    Returns
    -------
    SnapshotRecord
        The contract variant, test name and gas used.
    """
    contract_name = re.compile(rf"^(.*){re.escape(contract_suffix)}:")
    contract = _match(contract_name, line, "contract name")
    test = _match(TEST_NAME, line, "test name")
    gas = _match(GAS_AMOUNT, line, "gas amount")
    return SnapshotRecord(contract, test, int(gas))


def parse_snapshot(text: str, config: ReportConfig) -> GasResults:
    """Collects the measurements from the contents of a snapshot file."""
    results = GasResults(config.variants)
    for line in text.splitlines():
        if not line.strip():
            continue
        record = parse_snapshot_line(line, config.contract_suffix)
        results.record(record.test, record.contract, record.gas)
    return results


def read_snapshot(config: ReportConfig, root: Path | str) -> GasResults:
    """Reads and parses the snapshot file in the foundry project root."""
    snapshot_path = Path(root) / config.snapshot_file
    with open(snapshot_path, "r", encoding="utf-8") as file:
        return parse_snapshot(file.read(), config)
