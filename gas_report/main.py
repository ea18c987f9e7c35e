"""Main entrypoints for the gas-report tools."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, NamedTuple, Sequence

from gas_report.config import ReportConfig, get_report_config
from gas_report.errors import ForgeCommandError
from gas_report.report import json_report, snapshot_report


def main(argv: Sequence[str] | None = None) -> None:
    """Prints the gas comparison table built from `forge snapshot`.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Command line arguments
    """
    run(snapshot_report, argv, "Compares gas usage of the map contracts using `forge snapshot`.")


def main_json(argv: Sequence[str] | None = None) -> None:
    """Prints the gas comparison table built from `forge test --json`.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Command line arguments
    """
    run(json_report, argv, "Compares gas usage of the map contracts using `forge test --json`.")


def run(
    report: Callable[[ReportConfig, Path | str], str], argv: Sequence[str] | None, description: str
) -> None:
    """Loads the config, builds the report and prints it. Exits with status 1 if forge fails."""
    logging.basicConfig(stream=sys.stderr, level=logging.INFO, format="%(levelname)s: %(message)s")

    args = parse_arguments(argv, description)
    config = get_report_config(args.config_file_path)
    try:
        markdown = report(config, args.root)
    except ForgeCommandError as e:
        logging.error(f"Forge command failed (return code {e.returncode})")
        if e.stderr:
            logging.debug(e.stderr)
        sys.exit(1)

    print(markdown)


class Args(NamedTuple):
    """Command line arguments for gas-report."""

    config_file_path: str | None
    root: str


def namespace_to_args(namespace: argparse.Namespace) -> Args:
    """Converts argprase.Namespace to Args."""
    return Args(
        config_file_path=namespace.config,
        root=namespace.root,
    )


def parse_arguments(argv: Sequence[str] | None = None, description: str = "") -> Args:
    """Parses input arguments"""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a yaml config file. Defaults to the config bundled with gas-report.",
    )

    parser.add_argument(
        "--root",
        default=".",
        help="Path to the foundry project to run forge in. Defaults to the current directory.",
    )

    # Use system arguments if none were passed
    if argv is None:
        argv = sys.argv[1:]

    return namespace_to_args(parser.parse_args(argv))


if __name__ == "__main__":
    main()
