# SPDX-License-Identifier: MIT
"""Typed model of a Bukkit API version.

A Version is built once, either from an identifier string or from explicit
components, and never changes afterwards. It renders two forms:

- plain (vanilla): the Minecraft release, e.g. ``1.18-rc3``
- full: the Bukkit API identifier, e.g. ``1.18-rc3-R0.1-SNAPSHOT``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from .errors import (
    ConflictingQualifiersError,
    InvalidComponentError,
    MissingRequiredFieldError,
)
from .grammar import SNAPSHOT_MARKER, match_identifier

if TYPE_CHECKING:
    from .compare import Comparison, Precision

logger = logging.getLogger(__name__)

# Added to release candidate numbers so any rc ranks after any pre-release
RC_OFFSET = 10000

# Ranking of a final release: after every pre-release and release candidate
FINAL_RANKING = RC_OFFSET * 2

_NUMERIC_FIELDS = (
    "major",
    "minor",
    "patch",
    "prerelease",
    "release_candidate",
    "revision_major",
    "revision_minor",
)

# Components the grammar allows only one digit for
_SINGLE_DIGIT_FIELDS = frozenset({"prerelease", "revision_major", "revision_minor"})


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed Bukkit API version.

    Attributes:
        major: Major version number
        minor: Minor version number (None only for a bare ``MAJOR`` parsed leniently)
        patch: Patch version number
        prerelease: Pre-release number (``-preN``)
        release_candidate: Release candidate number (``-rcN``)
        revision_major: First part of the Bukkit revision (``-RX``)
        revision_minor: Second part of the Bukkit revision (``-RX.Y``)
        beta: Whether this is a Minecraft beta (``b`` prefix)
    """

    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: Optional[int] = None
    release_candidate: Optional[int] = None
    revision_major: Optional[int] = None
    revision_minor: Optional[int] = None
    beta: bool = False

    def __post_init__(self) -> None:
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if value < 0:
                raise InvalidComponentError(
                    self._describe(), f"{name} must not be negative, got {value}"
                )
            if name in _SINGLE_DIGIT_FIELDS and value > 9:
                raise InvalidComponentError(
                    self._describe(), f"{name} must be a single digit, got {value}"
                )

        if self.prerelease is not None and self.release_candidate is not None:
            raise ConflictingQualifiersError(self._describe())

        if self.minor is None:
            for name in ("patch", "prerelease", "release_candidate", "revision_major"):
                if getattr(self, name) is not None:
                    raise MissingRequiredFieldError(
                        self._describe(), f"{name} requires a minor version number"
                    )

        if self.revision_minor is not None and self.revision_major is None:
            raise MissingRequiredFieldError(
                self._describe(), "revision_minor requires revision_major"
            )

    @classmethod
    def from_components(
        cls,
        major: Optional[int],
        minor: Optional[int],
        patch: Optional[int] = None,
        prerelease: Optional[int] = None,
        release_candidate: Optional[int] = None,
        revision_major: Optional[int] = None,
        revision_minor: Optional[int] = None,
        beta: bool = False,
    ) -> "Version":
        """Build a Version from explicit components.

        Raises:
            MissingRequiredFieldError: If major or minor is None
            ConflictingQualifiersError: If both prerelease and release_candidate are set
            InvalidComponentError: If a number is negative, or prerelease or a
                revision part is not a single digit

        Examples:
            >>> Version.from_components(1, 19, 1, release_candidate=2).render_plain()
            '1.19.1-rc2'
        """
        if major is None or minor is None:
            raise MissingRequiredFieldError(
                None, "major and minor version numbers are required parameters"
            )
        return cls(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=prerelease,
            release_candidate=release_candidate,
            revision_major=revision_major,
            revision_minor=revision_minor,
            beta=beta,
        )

    @classmethod
    def parse(cls, raw: Any, strict: bool = True) -> "Version":
        """Parse an identifier. See :func:`parse_version`."""
        return parse_version(raw, strict)

    def _describe(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in (
                "major",
                "minor",
                "patch",
                "prerelease",
                "release_candidate",
                "revision_major",
                "revision_minor",
                "beta",
            )
        )
        return f"Version({fields})"

    def render_plain(self) -> str:
        """Return the vanilla Minecraft version, without revision or marker."""
        version = ("b" if self.beta else "") + str(self.major)
        if self.minor is not None:
            version += f".{self.minor}"
            if self.patch is not None:
                version += f".{self.patch}"
        if self.prerelease is not None:
            version += f"-pre{self.prerelease}"
        elif self.release_candidate is not None:
            version += f"-rc{self.release_candidate}"
        return version

    def render_full(self) -> str:
        """Return the full Bukkit API identifier, always ending in -SNAPSHOT.

        A Version without a minor number (only obtainable by lenient parsing of
        a bare major) renders as e.g. ``1-SNAPSHOT``, which the grammar does not
        accept, so that form cannot be parsed back.
        """
        version = self.render_plain()
        if self.revision_major is not None:
            version += f"-R{self.revision_major}"
            if self.revision_minor is not None:
                version += f".{self.revision_minor}"
        return version + SNAPSHOT_MARKER

    def __str__(self) -> str:
        """Return the full Bukkit API identifier."""
        return self.render_full()

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    @property
    def is_release_candidate(self) -> bool:
        return self.release_candidate is not None

    @property
    def is_release(self) -> bool:
        """Return True if this is neither a pre-release nor a release candidate."""
        return self.prerelease is None and self.release_candidate is None

    @property
    def ranking(self) -> int:
        """Unified ordering value for pre-releases and release candidates.

        Pre-releases rank by their number, release candidates by their number
        plus RC_OFFSET, and final releases rank at FINAL_RANKING. From rc10000 up
        this value reaches FINAL_RANKING, so compare_versions keys final
        releases separately.
        """
        if self.prerelease is not None:
            return self.prerelease
        if self.release_candidate is not None:
            return self.release_candidate + RC_OFFSET
        return FINAL_RANKING

    def compare(self, other: "Version", precision: Optional["Precision"] = None) -> "Comparison":
        """Compare with another Version. See :func:`bukkit_version.compare.compare_versions`."""
        from .compare import Precision, compare_versions

        if precision is None:
            precision = Precision.REVISION_MINOR
        return compare_versions(self, other, precision)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def _to_int(digits: Optional[str]) -> Optional[int]:
    return None if digits is None else int(digits)


def parse_version(raw: Any, strict: bool = True) -> Version:
    """Parse a Bukkit API version identifier into a Version.

    Args:
        raw: The identifier, e.g. ``"1.18-rc3-R0.1-SNAPSHOT"``
        strict: Require the ``-SNAPSHOT`` marker. Lenient parsing also accepts
            plain Minecraft versions such as ``"1.12.2"``.

    Returns:
        A Version with the parsed components

    Raises:
        MissingInputError: If ``raw`` is None
        MalformedIdentifierError: If ``raw`` does not match the grammar
        NotABuildIdentifierError: If ``strict`` and the marker is missing

    Examples:
        >>> parse_version("1.8-R0.1-SNAPSHOT")
        Version(major=1, minor=8, patch=None, prerelease=None, release_candidate=None, revision_major=0, revision_minor=1, beta=False)

        >>> parse_version("1.12.2", strict=False).render_plain()
        '1.12.2'
    """
    match = match_identifier(raw, strict)
    version = Version(
        major=int(match.major),
        minor=_to_int(match.minor),
        patch=_to_int(match.patch),
        prerelease=_to_int(match.prerelease),
        release_candidate=_to_int(match.release_candidate),
        revision_major=_to_int(match.revision_major),
        revision_minor=_to_int(match.revision_minor),
        beta=match.beta,
    )
    logger.debug("Parsed %r as %r", raw, version)
    return version


def to_vanilla(raw: Any) -> str:
    """Convert a Bukkit API identifier to the Minecraft version it implements.

    Examples:
        >>> to_vanilla("1.13-pre7-R0.1-SNAPSHOT")
        '1.13-pre7'
    """
    return parse_version(raw, strict=True).render_plain()
