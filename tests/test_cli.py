# tests/test_cli.py
from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from logmerge.cli import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "cli.yml"
    path.write_text(
        f"log:\n  dir: {tmp_path / 'logs'}\n  level: WARNING\n"
        "merge:\n  source_count: 4\n  max_fetch_delay_ms: 1\n  seed: 5\n",
        encoding="utf-8",
    )
    return path


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "v0.1.0" in result.output


def test_run_executes_both_modes(config_file: Path):
    result = runner.invoke(app, ["run", "--config", str(config_file), "--quiet"])

    assert result.exit_code == 0, result.output
    assert "Sync sort complete." in result.output
    assert "Async sort complete." in result.output
    assert result.output.count("Logs printed") == 2


def test_sync_echoes_entries(config_file: Path):
    result = runner.invoke(app, ["sync", "--config", str(config_file), "--sources", "1"])

    assert result.exit_code == 0, result.output
    assert "over 1 sources" in result.output
    assert "Logs printed" in result.output


def test_async_with_timeout(config_file: Path):
    result = runner.invoke(
        app,
        ["async", "--config", str(config_file), "--timeout", "1.0", "--max-delay-ms", "0", "-q"],
    )

    assert result.exit_code == 0, result.output
    assert "Async sort complete." in result.output


def test_zero_sources(config_file: Path):
    result = runner.invoke(app, ["sync", "--config", str(config_file), "-n", "0", "-q"])

    assert result.exit_code == 0, result.output
    assert "Sync sort complete." in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["sync", "--sources", "-1"],
        ["async", "--timeout", "0"],
        ["async", "--max-delay-ms", "-3"],
    ],
)
def test_invalid_options_exit_with_usage_error(config_file: Path, args):
    result = runner.invoke(app, args + ["--config", str(config_file)])

    assert result.exit_code == 2
    assert "must be" in result.output
