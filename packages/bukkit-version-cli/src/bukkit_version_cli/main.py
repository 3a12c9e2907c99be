# SPDX-License-Identifier: MIT
"""CLI entry point for bukkit-version command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from bukkit_version import BukkitVersionError, Precision

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def resolve_strict(self, strict: Optional[bool]) -> bool:
        """Return the --strict/--lenient flag, or the configured default."""
        return self.load_config().strict if strict is None else strict

    def resolve_precision(self, precision: Optional[str]) -> Precision:
        """Return the --precision option, or the configured default."""
        if precision is None:
            return self.load_config().precision
        return Precision.parse(precision)


pass_context = click.make_pass_decorator(Context, ensure=True)

PRECISION_CHOICES = [member.name.lower().replace("_", "-") for member in Precision]


def strict_option(func):
    """Add the shared --strict/--lenient flag to a command."""
    return click.option(
        "--strict/--lenient",
        default=None,
        help="Require the -SNAPSHOT build marker (default from configuration).",
    )(func)


def precision_option(func):
    """Add the shared --precision option to a command."""
    return click.option(
        "--precision",
        "-p",
        type=click.Choice(PRECISION_CHOICES, case_sensitive=False),
        default=None,
        help="Finest component to compare (default from configuration).",
    )(func)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="bukkit-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory instead of the current one.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Bukkit API version tool.

    Parse, validate, convert and compare the version identifiers reported by
    Bukkit-family servers.

    \b
    Examples:
        bukkit-version parse 1.18-rc3-R0.1-SNAPSHOT
        bukkit-version vanilla 1.8-R0.1-SNAPSHOT
        bukkit-version validate --lenient 1.12.2
        bukkit-version compare --lenient 1.19.1-pre2 1.19.1-rc1
        bukkit-version sort --lenient --precision minor 1.9 1.8 1.12
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register commands
from .commands import parse, vanilla, validate, compare, sort

cli.add_command(parse.parse)
cli.add_command(vanilla.vanilla)
cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except BukkitVersionError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
