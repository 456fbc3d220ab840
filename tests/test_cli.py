"""Tests for the command-line interface."""

import json
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from tickerlens.cli.main import cli

from conftest import downtrend_then_bounce, make_history, make_quote, uptrend_then_pullback


def write_symbol(directory: Path, symbol: str, closes: list[float]) -> None:
    payload = {
        "quote": make_quote(symbol, closes).model_dump(mode="json"),
        "history": [
            bar.model_dump(mode="json")
            for bar in make_history(closes, as_of=date.today())
        ],
    }
    (directory / f"{symbol}.json").write_text(json.dumps(payload))


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    write_symbol(directory, "UPTR", uptrend_then_pullback())
    write_symbol(directory, "DOWN", downtrend_then_bounce())
    return directory


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    config = str(tmp_path / "none.toml")

    def _run(*args: str):
        return runner.invoke(cli, ["--config", config, *args])

    return _run


class TestAnalyzeCommand:

    def test_shows_signal(self, run, data_dir):
        result = run("analyze", "uptr", "--data-dir", str(data_dir))

        assert result.exit_code == 0, result.output
        assert "UPTR" in result.output
        assert "BUY" in result.output
        assert "Indicators" in result.output
        assert "Health" in result.output

    def test_unknown_symbol_fails(self, run, data_dir):
        result = run("analyze", "NOPE", "--data-dir", str(data_dir))

        assert result.exit_code == 1
        assert "Analysis Failed" in result.output

    def test_rejects_path_in_symbol(self, run, data_dir):
        result = run("analyze", "../data/UPTR", "--data-dir", str(data_dir))

        assert result.exit_code == 1
        assert "Analysis Failed" in result.output
        assert "Invalid symbol" in result.output

    def test_requires_data_dir(self, run):
        result = run("analyze", "UPTR")

        assert result.exit_code == 1
        assert "No data directory configured" in result.output

    def test_data_dir_from_config(self, tmp_path, data_dir):
        config = tmp_path / "config.toml"
        config.write_text(f'[scan]\ndata_dir = "{data_dir.as_posix()}"\n')

        result = CliRunner().invoke(cli, ["--config", str(config), "analyze", "DOWN"])

        assert result.exit_code == 0, result.output
        assert "SELL" in result.output

    def test_invalid_config_fails(self, tmp_path, data_dir):
        config = tmp_path / "config.toml"
        config.write_text("[indicators]\nsma_period = -1\n")

        result = CliRunner().invoke(
            cli, ["--config", str(config), "analyze", "UPTR", "-d", str(data_dir)]
        )

        assert result.exit_code == 1
        assert "Configuration Error" in result.output


class TestScanCommand:

    def test_ranks_actionable_symbols(self, run, data_dir):
        result = run("scan", "DOWN", "UPTR", "--data-dir", str(data_dir))

        assert result.exit_code == 0, result.output
        assert "Scan Results (2 signals)" in result.output
        assert "1 bullish / 1 bearish" in result.output
        assert result.output.index("UPTR") < result.output.index("DOWN")

    def test_missing_symbols_do_not_abort(self, run, data_dir):
        result = run("scan", "NOPE", "UPTR", "-d", str(data_dir), "--workers", "2")

        assert result.exit_code == 0, result.output
        assert "UPTR" in result.output

    def test_no_results(self, run, data_dir):
        result = run("scan", "NOPE", "-d", str(data_dir))

        assert result.exit_code == 0
        assert "No actionable signals found." in result.output

    def test_rejects_zero_workers(self, run, data_dir):
        result = run("scan", "UPTR", "-d", str(data_dir), "--workers", "0")

        assert result.exit_code == 2


def test_lists_commands():
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "analyze" in result.output
    assert "scan" in result.output


def test_unknown_command():
    result = CliRunner().invoke(cli, ["bogus"])

    assert result.exit_code == 2
    assert "No such command" in result.output
