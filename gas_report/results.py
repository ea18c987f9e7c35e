"""Gas measurements collected per test and contract variant."""

from dataclasses import dataclass, field
from typing import Sequence


def format_gas(value: int) -> str:
    """Formats a gas amount with thousands separators, e.g. 1234567 -> "1,234,567"."""
    return f"{value:,}"


@dataclass
class GasResults:
    """Formatted gas amounts keyed by test name, then by contract variant.

    Tests keep the order they were first recorded in. A variant stays None
    until a measurement for it is recorded.
    """

    variants: Sequence[str]
    measurements: dict[str, dict[str, str | None]] = field(default_factory=dict)

    def record(self, test: str, variant: str, gas: int) -> None:
        """Stores the gas used by a contract variant for a test."""
        row = self.measurements.setdefault(test, {variant_name: None for variant_name in self.variants})
        row[variant] = format_gas(gas)

    def tests(self) -> list[str]:
        """Test names in the order they were first recorded."""
        return list(self.measurements)

    def __len__(self) -> int:
        return len(self.measurements)
