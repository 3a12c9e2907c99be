# SPDX-License-Identifier: MIT
"""Grammar recognition for Bukkit API version identifiers.

An identifier looks like ``[b]MAJOR[.MINOR[.PATCH][-preN|-rcN][-RX[.Y]][-SNAPSHOT]]``:

- ``1.8-R0.1-SNAPSHOT``
- ``1.12-pre3-SNAPSHOT``
- ``1.18-rc3-R0.1-SNAPSHOT``

Everything after MAJOR hangs off the MINOR group, so a minor-less string can
carry nothing else. This module only checks shape and hands back the captured
substrings; turning them into numbers is the job of :mod:`bukkit_version.version`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .errors import MalformedIdentifierError, MissingInputError, NotABuildIdentifierError

SNAPSHOT_MARKER = "-SNAPSHOT"

# Multi-digit numbers take no leading zero, so every match renders back unchanged
_NUMBER = r"(?:0|[1-9][0-9]*)"

# Digits are spelled [0-9] so that only ASCII identifiers are recognized
BUKKIT_VERSION_PATTERN = re.compile(
    r"(?P<beta>b)?"
    r"(?P<major>" + _NUMBER + r")"
    r"(?:\.(?P<minor>" + _NUMBER + r")"
    r"(?:\.(?P<patch>" + _NUMBER + r"))?"
    r"(?:-pre(?P<pre>[0-9])|-rc(?P<rc>" + _NUMBER + r"))?"
    r"(?:-R(?P<revision_major>[0-9])(?:\.(?P<revision_minor>[0-9]))?)?"
    r"(?P<snapshot>" + re.escape(SNAPSHOT_MARKER) + r")?"
    r")?"
)

# Server version strings of hosts too old to report a Bukkit API version,
# e.g. "git-Bukkit-0.0.0-1060-g7c8d2e5-b1060jnks (MC: 1.7.3)"
LEGACY_SERVER_PATTERN = re.compile(
    r".*\(MC: 1\.(?P<minor>[0-9])(?:\.(?P<patch>[0-9]))?\)"
)


@dataclass(frozen=True, slots=True)
class IdentifierMatch:
    """Named substrings captured from an identifier.

    Attributes:
        raw: The string that was matched
        beta: Whether the leading ``b`` was present
        major: Major version digits
        minor: Minor version digits, if present
        patch: Patch version digits, if present
        prerelease: Pre-release digit (``-preN``), if present
        release_candidate: Release candidate digits (``-rcN``), if present
        revision_major: First revision digit (``-RX``), if present
        revision_minor: Second revision digit (``-RX.Y``), if present
        is_build: Whether the ``-SNAPSHOT`` marker was present
    """

    raw: str
    beta: bool
    major: str
    minor: Optional[str] = None
    patch: Optional[str] = None
    prerelease: Optional[str] = None
    release_candidate: Optional[str] = None
    revision_major: Optional[str] = None
    revision_minor: Optional[str] = None
    is_build: bool = False


def match_identifier(raw: Any, strict: bool = True) -> IdentifierMatch:
    """Match a raw string against the identifier grammar.

    Args:
        raw: The candidate identifier
        strict: Require the trailing ``-SNAPSHOT`` marker

    Returns:
        The captured components

    Raises:
        MissingInputError: If ``raw`` is None
        MalformedIdentifierError: If ``raw`` is not a string or does not match
        NotABuildIdentifierError: If ``strict`` and the marker is missing

    Examples:
        >>> match_identifier("1.12-pre3-SNAPSHOT").prerelease
        '3'
        >>> match_identifier("1.12.2", strict=False).is_build
        False
    """
    if raw is None:
        raise MissingInputError()

    if not isinstance(raw, str):
        raise MalformedIdentifierError(
            raw, f"Version must be a string, got {type(raw).__name__}"
        )

    match = BUKKIT_VERSION_PATTERN.fullmatch(raw)
    if not match:
        raise MalformedIdentifierError(raw)

    is_build = match.group("snapshot") is not None
    if strict and not is_build:
        raise NotABuildIdentifierError(raw)

    return IdentifierMatch(
        raw=raw,
        beta=match.group("beta") is not None,
        major=match.group("major"),
        minor=match.group("minor"),
        patch=match.group("patch"),
        prerelease=match.group("pre"),
        release_candidate=match.group("rc"),
        revision_major=match.group("revision_major"),
        revision_minor=match.group("revision_minor"),
        is_build=is_build,
    )


def is_valid_identifier(raw: Any, strict: bool = True) -> bool:
    """Check whether a string is a valid identifier.

    Examples:
        >>> is_valid_identifier("1.8-R0.1-SNAPSHOT")
        True
        >>> is_valid_identifier("1.12.2")
        False
        >>> is_valid_identifier("1.12.2", strict=False)
        True
    """
    if not isinstance(raw, str):
        return False
    match = BUKKIT_VERSION_PATTERN.fullmatch(raw)
    if not match:
        return False
    return not strict or match.group("snapshot") is not None
