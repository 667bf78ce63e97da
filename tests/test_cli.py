# SPDX-License-Identifier: MIT
"""Tests for the semrange command line."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from semrange.cli import cli
from semrange.config import ConfigError


class TestParseCommand:
    """Tests for semrange parse."""

    def test_parse_keeps_shape(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test that the version prints at its original detail."""
        result = cli_runner.invoke(cli, ["-C", str(plain_project), "parse", "1.2"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.2"

    def test_parse_with_format(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test the --format option."""
        result = cli_runner.invoke(
            cli, ["-C", str(plain_project), "parse", "1.2-rc.1+b", "--format", "M.m.p-?"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.0-rc.1"

    def test_parse_verbose_fields(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test that verbose mode lists each field."""
        result = cli_runner.invoke(
            cli, ["-v", "-C", str(plain_project), "parse", "1.2.3-beta.1+build.5"]
        )

        assert result.exit_code == 0
        assert "prerelease: beta.1" in result.output
        assert "build:      build.5" in result.output

    def test_verbose_output_is_only_echoed_lines(
        self, cli_runner: CliRunner, plain_project: Path
    ) -> None:
        """Test that verbose mode adds nothing beyond the command's own output."""
        result = cli_runner.invoke(
            cli, ["-v", "-C", str(plain_project), "max", "^0.9.0", "0.9.0", "0.9.9"]
        )

        assert result.exit_code == 0
        assert result.output == "0.9.9\n"

    def test_parse_error(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test that grammar errors exit with status 1."""
        result = cli_runner.invoke(cli, ["-C", str(plain_project), "parse", "1.x.2"])

        assert result.exit_code == 1
        assert "unexpected character 'x' at position 2" in result.output

    def test_strict_flag(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test that --strict rejects incomplete versions."""
        result = cli_runner.invoke(cli, ["-C", str(plain_project), "--strict", "parse", "1.2"])

        assert result.exit_code == 1
        assert "missing patch component" in result.output

    def test_strict_from_config(self, cli_runner: CliRunner, strict_project: Path) -> None:
        """Test that [tool.semrange] strict applies."""
        result = cli_runner.invoke(cli, ["-C", str(strict_project), "parse", "01.2.3"])

        assert result.exit_code == 1
        assert "preceding zero" in result.output

    def test_permissive_overrides_config(
        self, cli_runner: CliRunner, strict_project: Path
    ) -> None:
        """Test that --permissive wins over the configuration."""
        result = cli_runner.invoke(
            cli, ["-C", str(strict_project), "--permissive", "parse", "1.2"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "v1.2.0"

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that a broken configuration is reported."""
        (tmp_path / "pyproject.toml").write_text("[tool.semrange]\nstrict = 1\n")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.0.0"])

        assert result.exit_code == 1
        assert isinstance(result.exception, ConfigError)


class TestCompareAndSort:
    """Tests for semrange compare and sort."""

    def test_compare(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test each comparison outcome."""
        base = ["-C", str(plain_project), "compare"]
        assert cli_runner.invoke(cli, base + ["1.0.0-rc.1", "1.0.0"]).output.strip() == "<"
        assert cli_runner.invoke(cli, base + ["1.0.0+a", "1.0.0+b"]).output.strip() == "="
        assert cli_runner.invoke(cli, base + ["1.10.0", "1.9.0"]).output.strip() == ">"

    def test_sort(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test ascending and descending sort."""
        versions = ["1.10.0", "1.2.0", "1.9.0", "1.2.0-rc.1"]

        result = cli_runner.invoke(cli, ["-C", str(plain_project), "sort", *versions])
        assert result.exit_code == 0
        assert result.output.split() == ["1.2.0-rc.1", "1.2.0", "1.9.0", "1.10.0"]

        result = cli_runner.invoke(cli, ["-C", str(plain_project), "sort", "--desc", *versions])
        assert result.output.split() == ["1.10.0", "1.9.0", "1.2.0", "1.2.0-rc.1"]


class TestRangeCommands:
    """Tests for semrange satisfies and max."""

    def test_satisfies(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test a satisfied range."""
        result = cli_runner.invoke(
            cli, ["-C", str(plain_project), "satisfies", "^1.0.0", "1.99.99"]
        )

        assert result.exit_code == 0
        assert "satisfies ^1.0.0" in result.output

    def test_not_satisfied(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test an unsatisfied range."""
        result = cli_runner.invoke(cli, ["-C", str(plain_project), "satisfies", "^1.0.0", "2.0.0"])

        assert result.exit_code == 1
        assert "does not satisfy" in result.output

    def test_invalid_range(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test that bad range syntax is reported."""
        result = cli_runner.invoke(cli, ["-C", str(plain_project), "satisfies", "abc", "1.0.0"])

        assert result.exit_code == 1
        assert "unable to parse version range" in result.output

    def test_max(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test finding the greatest satisfying version."""
        result = cli_runner.invoke(
            cli, ["-C", str(plain_project), "max", "^0.9.0", "0.9.0", "0.9.9", "1.0.0"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "0.9.9"

    def test_max_not_found(self, cli_runner: CliRunner, plain_project: Path) -> None:
        """Test that no match exits with status 1."""
        result = cli_runner.invoke(
            cli, ["-C", str(plain_project), "max", "^2", "0.9.0", "0.9.9", "1.0.0"]
        )

        assert result.exit_code == 1
        assert "No version satisfies ^2" in result.output
