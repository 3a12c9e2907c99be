# SPDX-License-Identifier: MIT
"""Sort Bukkit API versions."""

from __future__ import annotations

from typing import Optional

import click

from bukkit_version import BukkitVersionError, parse_version, sort_versions

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context, precision_option, strict_option


@click.command()
@click.argument("versions", nargs=-1, required=True)
@precision_option
@strict_option
@click.option("--reverse", "-r", is_flag=True, help="Print the newest version first.")
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    precision: Optional[str],
    strict: Optional[bool],
    reverse: bool,
) -> None:
    """Print VERSIONS from oldest to newest.

    Versions that are the same at the chosen precision keep their input order.

    \b
    Examples:
        bukkit-version sort 1.9-R0.1-SNAPSHOT 1.8-R0.1-SNAPSHOT
        bukkit-version sort --lenient --reverse 1.19.1-rc1 1.19.1-pre2 1.19.1
    """
    try:
        strict = ctx.resolve_strict(strict)
        level = ctx.resolve_precision(precision)
        parsed = [parse_version(version, strict=strict) for version in versions]
        ordered = sort_versions(parsed, level, reverse=reverse)
    except (BukkitVersionError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    # Print the identifiers as given rather than re-rendered
    raw_by_id = {id(version): raw for raw, version in zip(versions, parsed)}
    for version in ordered:
        echo_info(raw_by_id[id(version)])
