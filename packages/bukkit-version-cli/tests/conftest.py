# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def lenient_project(tmp_path: Path) -> Path:
    """Create a project directory whose configuration defaults to lenient parsing."""
    project_dir = tmp_path / "lenient_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "example-plugin"
version = "1.0.0"

[tool.bukkit-version]
strict = false
precision = "minor"
"""
    )
    return project_dir


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a project directory without any pyproject.toml."""
    project_dir = tmp_path / "empty_project"
    project_dir.mkdir()
    return project_dir
