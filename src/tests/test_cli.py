"""CLI tests for the yawst command."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from yawst import __version__
from yawst.__main__ import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


class TestFlags:
    """Test suite for -v, -h and invalid flags."""

    def test_version(self, runner: CliRunner) -> None:
        """Test -v prints name, version and author."""
        result = runner.invoke(cli, ["-v"])

        assert result.exit_code == 0
        assert f"yawst {__version__}" in result.output
        assert "Yet Another Web Scraping Tool" in result.output
        assert "Author: Adrian Rosicki" in result.output

    def test_help(self, runner: CliRunner, config_file: Path) -> None:
        """Test -h describes capabilities, configuration and usage."""
        result = runner.invoke(cli, ["-h"])

        assert result.exit_code == 0
        assert "Usage: yawst" in result.output
        assert "Scrape Text" in result.output
        assert "Scrape Table" in result.output
        for key in (
            "FILE_INPUT_DEFAULT",
            "TABLE_SEPARATOR",
            "OMIT_TABLE_HEADERS",
            "AUTOCLOSE",
            "WHOLE_ELEMENTS",
        ):
            assert key in result.output

    def test_help_does_not_create_config(self, runner: CliRunner, config_file: Path) -> None:
        """Test printing help has no side effects."""
        runner.invoke(cli, ["-h"])

        assert not config_file.exists()

    @pytest.mark.parametrize("args", [["-x"], ["--nope"], ["extra"]])
    def test_invalid_arguments_exit_1(self, runner: CliRunner, args: list[str]) -> None:
        """Test unknown flags print usage and exit with status 1."""
        result = runner.invoke(cli, args)

        assert result.exit_code == 1
        assert "Usage: yawst" in result.output


class TestStartup:
    """Test suite for configuration loading at startup."""

    @patch("yawst.__main__.run_menu")
    def test_runs_menu_with_loaded_config(
        self, mock_run_menu: MagicMock, runner: CliRunner, config_file: Path
    ) -> None:
        """Test the config file is created and passed to the menu loop."""
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert config_file.exists()
        mock_run_menu.assert_called_once()
        _, config = mock_run_menu.call_args.args
        assert config.autoclose is True

    @patch("yawst.__main__.run_menu")
    def test_invalid_config_is_fatal(
        self, mock_run_menu: MagicMock, runner: CliRunner, config_file: Path
    ) -> None:
        """Test a bad config value stops before the menu with status 1."""
        config_file.write_text("OMIT_TABLE_HEADERS=sometimes\n")

        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "OMIT_TABLE_HEADERS" in result.output
        mock_run_menu.assert_not_called()
