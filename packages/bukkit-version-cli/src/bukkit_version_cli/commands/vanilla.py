# SPDX-License-Identifier: MIT
"""Convert Bukkit API identifiers to Minecraft versions."""

from __future__ import annotations

import click

from bukkit_version import BukkitVersionError, to_vanilla

from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def vanilla(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the Minecraft version implemented by each Bukkit API VERSION.

    \b
    Examples:
        bukkit-version vanilla 1.8-R0.1-SNAPSHOT        # 1.8
        bukkit-version vanilla 1.13-pre7-R0.1-SNAPSHOT  # 1.13-pre7
    """
    failed = False

    for version in versions:
        try:
            echo_info(to_vanilla(version))
        except BukkitVersionError as e:
            echo_error(str(e))
            failed = True

    if failed:
        raise SystemExit(1)
