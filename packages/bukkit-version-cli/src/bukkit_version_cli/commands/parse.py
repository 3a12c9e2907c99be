# SPDX-License-Identifier: MIT
"""Parse an identifier and show its components."""

from __future__ import annotations

import json
from typing import Any, Optional

import click

from bukkit_version import BukkitVersionError, Version, parse_version

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context, strict_option

# Component attributes in display order
COMPONENTS = (
    "beta",
    "major",
    "minor",
    "patch",
    "prerelease",
    "release_candidate",
    "revision_major",
    "revision_minor",
)


def version_to_dict(version: Version) -> dict[str, Any]:
    """Return the components and both renderings of a Version."""
    data: dict[str, Any] = {name: getattr(version, name) for name in COMPONENTS}
    data["vanilla"] = version.render_plain()
    data["bukkit"] = version.render_full()
    return data


@click.command()
@click.argument("version")
@strict_option
@click.option("--json", "as_json", is_flag=True, help="Print the components as JSON.")
@pass_context
def parse(ctx: Context, version: str, strict: Optional[bool], as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        bukkit-version parse 1.18-rc3-R0.1-SNAPSHOT
        bukkit-version parse --lenient --json 1.12.2
    """
    try:
        parsed = parse_version(version, strict=ctx.resolve_strict(strict))
    except (BukkitVersionError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    data = version_to_dict(parsed)

    if as_json:
        echo_info(json.dumps(data, indent=2))
        return

    width = max(len(key) for key in data)
    for key, value in data.items():
        shown = "-" if value is None else str(value).lower() if isinstance(value, bool) else value
        echo_info(f"{key.ljust(width)}  {shown}")
