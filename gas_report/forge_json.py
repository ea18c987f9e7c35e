"""Parses the report printed by `forge test --json`.

The report is a single line of JSON shaped like this:

    {
        "test/gas-comparison/HashMap.t.sol:HashMapGasTest": {
            "test_results": {
                "test_writeSingleKey()": {
                    "decoded_logs": ["Gas used: 21000"],
                    ...
                },
                ...
            },
            ...
        },
        ...
    }

Forge prints other lines around it (compiler progress and so on), so the
report is picked out as the line that starts with `{`.
"""

import re

from pydantic import BaseModel, ConfigDict, TypeAdapter

from gas_report.config import ReportConfig
from gas_report.errors import GasReportParseError
from gas_report.results import GasResults

GAS_USED_PREFIX = "Gas used"
DIGITS = re.compile(r"\d+")


class ForgeTestResult(BaseModel):
    """The result of a single test function."""

    model_config = ConfigDict(extra="allow")

    decoded_logs: list[str]


class ForgeSuiteResult(BaseModel):
    """The results of every test in a test contract."""

    model_config = ConfigDict(extra="allow")

    test_results: dict[str, ForgeTestResult]


ForgeTestReport = TypeAdapter(dict[str, ForgeSuiteResult])


def extract_json_payload(stdout: str) -> str:
    """Returns the first line of forge's stdout that starts with `{`."""
    for line in stdout.splitlines():
        line = line.strip()
        if line.startswith("{"):
            return line
    raise GasReportParseError("No JSON test report found in forge output")


def contract_variant(suite_key: str, contract_suffix: str = "GasTest") -> str:
    """Maps a suite key like `test/HashMap.t.sol:HashMapGasTest` to `HashMap`."""
    try:
        contract_name = suite_key.split(":")[1]
    except IndexError as e:
        raise GasReportParseError(f"Test suite key has no contract name: {suite_key!r}") from e
    return contract_name.removesuffix(contract_suffix)


def gas_used(decoded_logs: list[str]) -> int:
    """Finds the first log line starting with "Gas used" and returns the first number in it."""
    line = next((log for log in decoded_logs if log.startswith(GAS_USED_PREFIX)), None)
    if line is None:
        raise GasReportParseError(f"No '{GAS_USED_PREFIX}' line in logs: {decoded_logs}")
    match = DIGITS.search(line)
    if match is None:
        raise GasReportParseError(f"No gas amount in log line: {line!r}")
    return int(match.group())


def parse_test_report(payload: str, config: ReportConfig) -> GasResults:
    """Collects the measurements from a `forge test --json` report.

    Parameters
    ----------
    payload : str
        The JSON report line.
    config : ReportConfig
        The report configuration.

    Returns
    -------
    GasResults
        The gas used by each variant for each test.
    """
    report = ForgeTestReport.validate_json(payload)
    results = GasResults(config.variants)
    for suite_key, suite in report.items():
        variant = contract_variant(suite_key, config.contract_suffix)
        for test_name, test_result in suite.test_results.items():
            test = test_name.removesuffix("()")
            results.record(test, variant, gas_used(test_result.decoded_logs))
    return results
