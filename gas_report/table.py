"""Lays out gas results as rows of the comparison table."""

from gas_report.config import ReportConfig
from gas_report.results import GasResults

Row = list[str | None]


def ordered_tests(results: GasResults, display_order: tuple[str, ...]) -> list[str]:
    """Returns the recorded tests in display order.

    Tests missing from the display order are appended in the order they were recorded.
    """
    recorded = results.tests()
    in_order = [test for test in display_order if test in results.measurements]
    return in_order + [test for test in recorded if test not in display_order]


def build_table(results: GasResults, config: ReportConfig, ordered: bool = False) -> list[Row]:
    """Builds the header row and one row per recorded test.

    Parameters
    ----------
    results : GasResults
        The recorded measurements.
    config : ReportConfig
        Holds the contract variants, test descriptions and display order.
    ordered : bool, optional
        Use the configured display order instead of the order tests were recorded in.

    Returns
    -------
    list[Row]
        The table rows. Cells without a description or measurement are None.
    """
    tests = ordered_tests(results, config.display_order) if ordered else results.tests()
    table: list[Row] = [["Test", *config.variants]]
    for test in tests:
        measurements = results.measurements[test]
        table.append([config.descriptions.get(test), *(measurements.get(variant) for variant in config.variants)])
    return table
