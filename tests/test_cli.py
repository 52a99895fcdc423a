"""
Tests for the command line interface.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from hare_eda.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestRunEdaCommand:
    """Tests for the run-eda command."""

    def test_runs_pipeline(self, runner: CliRunner, project_dir: Path) -> None:
        """Test the command reports where outputs went."""
        with patch("hare_eda.cli.setup_logging"):
            result = runner.invoke(cli, ["run-eda", "--config", str(project_dir / "config" / "eda.yml")])
        assert result.exit_code == 0, result.output
        assert "Report finished" in result.output
        assert "Figures: 3" in result.output
        assert (project_dir / "reports" / "report.html").exists()

    def test_verbose_sets_debug(self, runner: CliRunner, project_dir: Path) -> None:
        """Test --verbose configures DEBUG logging."""
        with patch("hare_eda.cli.setup_logging") as setup:
            runner.invoke(cli, ["--verbose", "run-eda", "--config", str(project_dir / "config" / "eda.yml")])
        setup.assert_called_once_with(level=logging.DEBUG, log_file=None)

    def test_missing_input_is_clean_error(self, runner: CliRunner, project_dir: Path) -> None:
        """Test a missing data file exits with status 1 and a message."""
        with patch("hare_eda.cli.setup_logging"):
            result = runner.invoke(
                cli,
                ["run-eda", "--config", str(project_dir / "config" / "eda.yml"),
                 "--input", str(project_dir / "data" / "missing.csv")],
            )
        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_default_config_option(self) -> None:
        """Test run-eda defaults to config/eda.yml."""
        option = next(p for p in cli.commands["run-eda"].params if p.name == "config_path")
        assert option.default == "config/eda.yml"

    def test_unsupported_format_is_clean_error(self, runner: CliRunner, project_dir: Path) -> None:
        """Test a spreadsheet input exits with status 1 and a message."""
        workbook = project_dir / "data" / "hares.xlsx"
        workbook.write_bytes(b"")
        with patch("hare_eda.cli.setup_logging"):
            result = runner.invoke(
                cli,
                ["run-eda", "--config", str(project_dir / "config" / "eda.yml"), "--input", str(workbook)],
            )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unsupported file format: .xlsx" in result.output

    def test_no_input_path_is_clean_error(self, runner: CliRunner, project_dir: Path) -> None:
        """Test a config without input_path and no --input exits with status 1."""
        config = project_dir / "config" / "bare.yml"
        config.write_text("date_format: '%m/%d/%Y'\n", encoding="utf-8")
        with patch("hare_eda.cli.setup_logging"):
            result = runner.invoke(cli, ["run-eda", "--config", str(config)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "No input_path" in result.output
