import json
import logging

import pytest

from gas_report import GasReportParseError
from gas_report.config import DEFAULT_CONFIG_PATH
from gas_report.main import main, main_json, parse_arguments

SNAPSHOT = """\
HashMapGasTest:test_writeSingleKey() (gas: 21000)
MappingGasTest:test_writeSingleKey() (gas: 22000)
"""


def forge_test_stdout() -> str:
    def suite(**gas_by_test):
        return {
            "test_results": {f"{test}()": {"decoded_logs": [f"Gas used: {gas}"]} for test, gas in gas_by_test.items()}
        }

    report = {
        "test/gas-comparison/HashMap.t.sol:HashMapGasTest": suite(test_remove10kKeys=40000, test_writeSingleKey=21000),
        "test/gas-comparison/Enumerable.t.sol:EnumerableMapGasTest": suite(test_writeSingleKey=1234567),
    }
    return "Compiling...\nRan 2 test suites\n" + json.dumps(report) + "\n"


class TestParseArguments:
    """Test command line parsing."""

    def test_defaults(self):
        args = parse_arguments([])
        assert args.config_file_path is None
        assert args.root == "."

    def test_flags(self):
        args = parse_arguments(["--config", "gas.yaml", "--root", "contracts"])
        assert args.config_file_path == "gas.yaml"
        assert args.root == "contracts"


class TestSnapshotReport:
    """Test the `forge snapshot` report end to end."""

    def test_prints_table(self, fake_forge, tmp_path, capsys):
        def forge(command, cwd):
            (tmp_path / ".gas-snapshot").write_text(SNAPSHOT, encoding="utf-8")
            return 0, ""

        calls = fake_forge(forge)
        main(["--root", str(tmp_path)])

        assert calls == [["forge", "snapshot", "--match-path", "./test/gas-comparison/*"]]
        assert capsys.readouterr().out.splitlines() == [
            "| Test | HashMap | EnumerableMap | Mapping |",
            "| --- | --- | --- | --- |",
            "| Write a single key | 21,000 |  | 22,000 |",
        ]

    def test_forge_failure(self, fake_forge, tmp_path, capsys, caplog):
        fake_forge(lambda command, cwd: (1, ""))
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            main(["--root", str(tmp_path)])

        assert exc_info.value.code == 1
        assert "Forge command failed" in caplog.text
        assert capsys.readouterr().out == ""

    def test_forge_missing(self, tmp_path, capsys):
        # Point the config at a binary that does not exist.
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            DEFAULT_CONFIG_PATH.read_text(encoding="utf-8").replace("forge_binary: forge", "forge_binary: ./no-forge"),
            encoding="utf-8",
        )
        with pytest.raises(SystemExit):
            main(["--root", str(tmp_path), "--config", str(config_path)])
        assert capsys.readouterr().out == ""

    def test_malformed_snapshot(self, fake_forge, tmp_path, capsys):
        def forge(command, cwd):
            (tmp_path / ".gas-snapshot").write_text(SNAPSHOT + "HashMapGasTest:test_write10kKeys()\n", encoding="utf-8")
            return 0, ""

        fake_forge(forge)
        with pytest.raises(GasReportParseError):
            main(["--root", str(tmp_path)])
        assert capsys.readouterr().out == ""


class TestJsonReport:
    """Test the `forge test --json` report end to end."""

    def test_prints_table_in_display_order(self, fake_forge, tmp_path, capsys):
        calls = fake_forge(lambda command, cwd: (0, forge_test_stdout()))
        main_json(["--root", str(tmp_path)])

        assert calls == [["forge", "test", "--match-path", "./test/gas-comparison/*", "--json"]]
        assert capsys.readouterr().out.splitlines() == [
            "| Test | HashMap | EnumerableMap | Mapping |",
            "| --- | --- | --- | --- |",
            "| Write a single key | 21,000 | 1,234,567 |  |",
            "| Remove 10k keys | 40,000 |  |  |",
        ]

    def test_forge_failure(self, fake_forge, tmp_path, capsys):
        fake_forge(lambda command, cwd: (2, ""))
        with pytest.raises(SystemExit):
            main_json(["--root", str(tmp_path)])
        assert capsys.readouterr().out == ""

    def test_no_report_in_output(self, fake_forge, tmp_path):
        fake_forge(lambda command, cwd: (0, "Compiler run successful!\n"))
        with pytest.raises(GasReportParseError):
            main_json(["--root", str(tmp_path)])
