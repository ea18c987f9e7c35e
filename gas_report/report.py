"""Runs forge and turns its output into the gas comparison table."""

import logging
from pathlib import Path

from gas_report.config import ReportConfig
from gas_report.forge import run_forge_snapshot, run_forge_test_json
from gas_report.forge_json import extract_json_payload, parse_test_report
from gas_report.markdown import render_markdown_table
from gas_report.snapshot import read_snapshot
from gas_report.table import build_table


def snapshot_report(config: ReportConfig, root: Path | str) -> str:
    """Builds the table from the snapshot file written by `forge snapshot`.

    Rows follow the order tests appear in the snapshot file.
    """

    # Run forge, which rewrites the snapshot file.
    run_forge_snapshot(config, root)

    # Parse the snapshot file.
    results = read_snapshot(config, root)
    logging.info(f"Parsed {len(results)} tests from {config.snapshot_file}")

    # Lay out and render the table.
    return render_markdown_table(build_table(results, config))


def json_report(config: ReportConfig, root: Path | str) -> str:
    """Builds the table from the report printed by `forge test --json`.

    Rows follow the configured display order.
    """

    # Run forge and pick the JSON report out of its output.
    stdout = run_forge_test_json(config, root)
    payload = extract_json_payload(stdout)

    # Parse the report.
    results = parse_test_report(payload, config)
    logging.info(f"Parsed {len(results)} tests from the forge test report")

    # Lay out and render the table.
    return render_markdown_table(build_table(results, config, ordered=True))
