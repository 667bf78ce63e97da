# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semrange tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def strict_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml enables strict parsing."""
    project_dir = tmp_path / "strict_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "strict-project"
version = "1.0.0"

[tool.semrange]
strict = true
format = "vM.m.p-?"
"""
    )
    return project_dir


@pytest.fixture
def plain_project(tmp_path: Path) -> Path:
    """Create a project directory without a [tool.semrange] table."""
    project_dir = tmp_path / "plain_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "plain-project"
version = "1.0.0"
"""
    )
    return project_dir
