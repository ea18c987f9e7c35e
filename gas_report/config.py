"""Utilities for working with the report config file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, model_validator

DEFAULT_CONFIG_PATH = Path(__file__).parent / "gas_report.yaml"


class ReportConfig(BaseModel):
    """Settings for running forge and laying out the comparison table."""

    model_config = ConfigDict(frozen=True)

    forge_binary: str
    match_path: str
    snapshot_file: str
    contract_suffix: str

    variants: tuple[str, ...]
    descriptions: dict[str, str]
    display_order: tuple[str, ...]

    @model_validator(mode="after")
    def check_consistency(self) -> "ReportConfig":
        """Every ordered scenario needs a description and variants must be distinct."""
        if not self.variants:
            raise ValueError("at least one contract variant is required")
        if len(set(self.variants)) != len(self.variants):
            raise ValueError(f"duplicate contract variants: {self.variants}")
        unknown = [test for test in self.display_order if test not in self.descriptions]
        if unknown:
            raise ValueError(f"display_order references tests without a description: {unknown}")
        return self


def get_report_config(config_file_path: str | Path | None = None) -> ReportConfig:
    """Loads a yaml configuation file into a ReportConfig model.

    Parameters
    ----------
    config_file_path : str | Path | None, optional
        The path to the yaml config. Defaults to the config bundled with the package.

    Returns
    -------
    ReportConfig
        The report configuration.
    """

    # Load the raw configuration data.
    config_file_path = Path(config_file_path) if config_file_path is not None else DEFAULT_CONFIG_PATH
    with open(config_file_path, "r", encoding="utf-8") as file:
        config_data = yaml.safe_load(file)

    # Populate the configuration model and return the result.
    report_config = ReportConfig(**config_data)
    return report_config
