# SPDX-License-Identifier: MIT
"""Detection of the running server's version from its host environment.

Hosts implementing Bukkit API 1.0 or later report an identifier through
``get_bukkit_version()``. Older beta-era hosts only expose a free-form server
version string ending in ``(MC: 1.x[.y])``, from which a beta Version is
synthesized.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from .errors import BukkitVersionError, MalformedIdentifierError, MissingInputError
from .grammar import LEGACY_SERVER_PATTERN
from .version import Version, parse_version

logger = logging.getLogger(__name__)


class HostServer(Protocol):
    """What the core needs from a running server."""

    def get_bukkit_version(self) -> str: ...

    def get_version(self) -> str: ...


def parse_legacy_server_version(text: Any) -> Version:
    """Parse the server version string of a pre-1.0 host.

    Args:
        text: Server version string, e.g. ``"git-Bukkit-0.0.0-1060 (MC: 1.7.3)"``

    Returns:
        A beta Version with major 1 and the reported minor/patch

    Raises:
        MissingInputError: If ``text`` is None
        MalformedIdentifierError: If the string carries no ``(MC: 1.x[.y])`` suffix

    Examples:
        >>> parse_legacy_server_version("CraftBukkit (MC: 1.7.3)").render_plain()
        'b1.7.3'
    """
    if text is None:
        raise MissingInputError()
    if not isinstance(text, str):
        raise MalformedIdentifierError(
            text, f"Version must be a string, got {type(text).__name__}"
        )

    match = LEGACY_SERVER_PATTERN.fullmatch(text)
    if not match:
        raise MalformedIdentifierError(text, f"unhandled beta version: {text}")

    patch = match.group("patch")
    return Version(
        major=1,
        minor=int(match.group("minor")),
        patch=None if patch is None else int(patch),
        beta=True,
    )


def detect_version(server: Any) -> Version:
    """Determine the Version of a running server.

    Prefers ``server.get_bukkit_version()`` (parsed strictly) and falls back to
    the legacy ``(MC: ...)`` suffix of ``server.get_version()`` when the host
    predates that method.

    Raises:
        MissingInputError: If the host exposes neither method
        ParseError: If the reported string cannot be parsed
    """
    get_bukkit_version = getattr(server, "get_bukkit_version", None)
    if get_bukkit_version is not None:
        return parse_version(get_bukkit_version(), strict=True)

    get_version = getattr(server, "get_version", None)
    if get_version is None:
        raise MissingInputError(server, "cannot find a server version on the host")

    logger.debug("Host has no Bukkit API version, falling back to server version string")
    return parse_legacy_server_version(get_version())


def describe_version(version: Version) -> str:
    """Return the one-line summary logged on detection.

    Examples:
        >>> describe_version(Version(1, 18, release_candidate=3, revision_major=0, revision_minor=1))
        'Detected Minecraft 1.18-rc3, implementing Bukkit API 1.18-rc3-R0.1-SNAPSHOT'
    """
    return (
        f"Detected Minecraft {version.render_plain()}, "
        f"implementing Bukkit API {version.render_full()}"
    )


def detect_and_log(
    server: Any, log: Optional[logging.Logger] = None
) -> Optional[Version]:
    """Detect the server version and log it, returning None when it is unknown.

    Args:
        server: The host server object
        log: Logger to report to (defaults to this module's logger)

    Returns:
        The detected Version, or None if detection failed
    """
    log = log or logger
    try:
        version = detect_version(server)
    except BukkitVersionError as e:
        log.warning("Failed to detect Bukkit API version by default means: %s", e)
        return None

    log.info(describe_version(version))
    return version
