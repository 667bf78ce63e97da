# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the ``[tool.semrange]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        strict: Parse versions as exact SemVer 2.0.0 instead of permissively
        format: Template used to print versions (empty for their own shape)
    """

    project_dir: Optional[Path] = None
    strict: bool = False
    format: str = ""

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid or holds wrongly typed values
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        tool_semrange = pyproject.get("tool", {}).get("semrange", {})
        if not isinstance(tool_semrange, dict):
            raise ConfigError("[tool.semrange] must be a table")

        strict = tool_semrange.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError(f"tool.semrange.strict must be a boolean, got {strict!r}")

        template = tool_semrange.get("format", "")
        if not isinstance(template, str):
            raise ConfigError(f"tool.semrange.format must be a string, got {template!r}")

        return cls(project_dir=project_dir, strict=strict, format=template)


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory at or above ``start_dir`` holding pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration, falling back to defaults outside a project.

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    root = find_project_root(project_dir)
    if root is None:
        return CLIConfig()
    return CLIConfig.from_pyproject(root)
