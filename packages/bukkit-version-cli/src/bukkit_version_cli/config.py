# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

Defaults can be set per project in a ``[tool.bukkit-version]`` table::

    [tool.bukkit-version]
    strict = false
    precision = "pre-or-rc"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from bukkit_version import Precision

TOOL_SECTION = "bukkit-version"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        strict: Require the -SNAPSHOT marker when parsing identifiers
        precision: Default precision for compare and sort
    """

    project_dir: Path
    strict: bool = True
    precision: Precision = Precision.REVISION_MINOR

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or has invalid values
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
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a value has the wrong type or an unknown precision
        """
        tool_config = pyproject.get("tool", {}).get(TOOL_SECTION, {})
        if not isinstance(tool_config, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")

        strict = tool_config.get("strict", True)
        if not isinstance(strict, bool):
            raise ConfigError(
                f"[tool.{TOOL_SECTION}].strict must be true or false, got {strict!r}"
            )

        precision_name = tool_config.get("precision", Precision.REVISION_MINOR.name)
        if not isinstance(precision_name, str):
            raise ConfigError(
                f"[tool.{TOOL_SECTION}].precision must be a string, got {precision_name!r}"
            )
        try:
            precision = Precision.parse(precision_name)
        except ValueError as e:
            raise ConfigError(f"[tool.{TOOL_SECTION}].precision: {e}") from e

        return cls(
            project_dir=project_dir,
            strict=strict,
            precision=precision,
        )


def find_project_root(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        The directory, or None if no pyproject.toml was found
    """
    current = (start_dir or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").exists():
            return directory

    return None


def load_config(project_dir: Optional[Path] = None) -> CLIConfig:
    """Load configuration for a project directory.

    Args:
        project_dir: Directory to search from (defaults to cwd)

    Returns:
        CLIConfig from the nearest pyproject.toml, or defaults if there is none

    Raises:
        ConfigError: If the configuration is invalid
    """
    root = find_project_root(project_dir)
    if root is None:
        return CLIConfig(project_dir=(project_dir or Path.cwd()).resolve())
    return CLIConfig.from_pyproject(root)
