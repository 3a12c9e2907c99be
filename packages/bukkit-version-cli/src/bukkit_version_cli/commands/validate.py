# SPDX-License-Identifier: MIT
"""Validate Bukkit API version identifiers."""

from __future__ import annotations

from typing import Optional

import click

from bukkit_version import BukkitVersionError, NotABuildIdentifierError, parse_version

from ..config import ConfigError
from ..main import (
    Context,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    pass_context,
    strict_option,
)


@click.command()
@click.argument("versions", nargs=-1, required=True)
@strict_option
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], strict: Optional[bool]) -> None:
    """Check that each VERSION is a valid identifier.

    In strict mode (the default) identifiers must end in -SNAPSHOT; with
    --lenient plain Minecraft versions such as 1.12.2 are accepted too.

    \b
    Examples:
        bukkit-version validate 1.8-R0.1-SNAPSHOT 1.18-rc3-R0.1-SNAPSHOT
        bukkit-version validate --lenient 1.12.2
    """
    try:
        strict = ctx.resolve_strict(strict)
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    errors: list[str] = []

    for version in versions:
        try:
            parsed = parse_version(version, strict=strict)
        except NotABuildIdentifierError:
            errors.append(f"{version}: missing -SNAPSHOT build marker (try --lenient)")
            continue
        except BukkitVersionError as e:
            errors.append(f"{version}: {e}")
            continue
        echo_info(f"{version}: valid (Minecraft {parsed.render_plain()})")

    if errors:
        echo_info("")
        echo_warning(f"Invalid ({len(errors)}):")
        for error in errors:
            echo_error(f"  - {error}")
        echo_error("\nValidation failed!")
        raise SystemExit(1)

    echo_success("\nValidation passed!")
