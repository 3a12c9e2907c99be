# SPDX-License-Identifier: MIT
"""Compare two Bukkit API versions."""

from __future__ import annotations

from typing import Optional

import click

from bukkit_version import BukkitVersionError, Comparison, compare_versions, parse_version

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context, precision_option, strict_option

_PHRASES = {
    Comparison.NEWER: "newer than",
    Comparison.SAME: "the same as",
    Comparison.OLDER: "older than",
}


@click.command()
@click.argument("version1")
@click.argument("version2")
@precision_option
@strict_option
@pass_context
def compare(
    ctx: Context,
    version1: str,
    version2: str,
    precision: Optional[str],
    strict: Optional[bool],
) -> None:
    """Report whether VERSION1 is newer than, older than or the same as VERSION2.

    \b
    Examples:
        bukkit-version compare 1.8-R0.1-SNAPSHOT 1.9-R0.1-SNAPSHOT
        bukkit-version compare -p minor --lenient 1.18.1 1.18.2
    """
    try:
        strict = ctx.resolve_strict(strict)
        level = ctx.resolve_precision(precision)
        result = compare_versions(
            parse_version(version1, strict=strict),
            parse_version(version2, strict=strict),
            level,
        )
    except (BukkitVersionError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{version1} is {_PHRASES[result]} {version2}")
