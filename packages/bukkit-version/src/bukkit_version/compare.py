# SPDX-License-Identifier: MIT
"""Granularity-bounded comparison of Bukkit API versions.

Components are compared in order of significance: beta flag, major, minor,
patch, pre-release/release-candidate ranking, revision major, revision minor.
Comparison stops with SAME once the requested precision has been passed.

A non-beta version is always newer than a beta version, whatever the numbers.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Optional, Union

from .errors import PrecisionMismatchError
from .version import RC_OFFSET, Version, parse_version

logger = logging.getLogger(__name__)


class Precision(IntEnum):
    """Component levels, coarsest to finest."""

    MAJOR = 1
    MINOR = 2
    PATCH = 3
    PRE_OR_RC = 4
    REVISION_MAJOR = 5
    REVISION_MINOR = 6

    @classmethod
    def parse(cls, name: str) -> "Precision":
        """Look up a level by name, ignoring case and accepting dashes.

        Examples:
            >>> Precision.parse("pre-or-rc")
            <Precision.PRE_OR_RC: 4>
        """
        try:
            return cls[name.strip().upper().replace("-", "_")]
        except KeyError:
            choices = ", ".join(member.name for member in cls)
            raise ValueError(f"Unknown precision '{name}'. Choose from: {choices}") from None


class Comparison(IntEnum):
    """Three-way comparison result, usable as -1/0/1."""

    OLDER = -1
    SAME = 0
    NEWER = 1

    def inverted(self) -> "Comparison":
        return Comparison(-self.value)


@dataclass(frozen=True, slots=True)
class RankingException:
    """Ranking offsets for a release whose pre-releases and rcs were published out of order.

    Attributes:
        prerelease_offset: Added to pre-release numbers above ``prerelease_after``
        prerelease_after: Pre-release numbers up to this one keep their ranking
        release_candidate_offset: Added to rc numbers above ``release_candidate_after``
        release_candidate_after: Release candidate numbers up to this one keep their ranking
    """

    prerelease_offset: int = 0
    prerelease_after: int = 0
    release_candidate_offset: int = 0
    release_candidate_after: int = 0

    def adjust(self, version: Version) -> int:
        if version.prerelease is not None and version.prerelease > self.prerelease_after:
            return self.prerelease_offset
        if (
            version.release_candidate is not None
            and version.release_candidate > self.release_candidate_after
        ):
            return self.release_candidate_offset
        return 0


# Releases that did not follow "every pre-release before every rc", keyed by
# (major, minor, patch) of non-beta versions.
RANKING_EXCEPTIONS: dict[tuple[int, int, Optional[int]], RankingException] = {
    # 1.19.1 shipped pre1, rc1, pre2, pre3, pre4, rc2, rc3
    (1, 19, 1): RankingException(
        prerelease_offset=RC_OFFSET + 1,
        prerelease_after=1,
        release_candidate_offset=100,
        release_candidate_after=1,
    ),
}


def effective_ranking(version: Version) -> int:
    """Return the pre-release/rc ranking after applying any release-specific exception.

    Examples:
        >>> effective_ranking(Version(1, 19, 1, prerelease=2)) > effective_ranking(
        ...     Version(1, 19, 1, release_candidate=1)
        ... )
        True
    """
    ranking = version.ranking
    if version.beta:
        return ranking
    exception = RANKING_EXCEPTIONS.get((version.major, version.minor, version.patch))
    if exception is None:
        return ranking
    offset = exception.adjust(version)
    if offset:
        logger.debug("Offsetting ranking of %s by %d", version.render_plain(), offset)
    return ranking + offset


def _qualifier_key(version: Version) -> tuple[bool, int]:
    # Final releases sort after every qualifier whatever its ranking
    return version.is_release, effective_ranking(version)


_Extractor = Callable[[Version], Optional[Union[int, tuple[bool, int]]]]

# Ordered (level, component name, extractor) triples walked by compare_versions
_COMPONENTS: tuple[tuple[Precision, str, _Extractor], ...] = (
    (Precision.MAJOR, "major", lambda v: v.major),
    (Precision.MINOR, "minor", lambda v: v.minor),
    (Precision.PATCH, "patch", lambda v: v.patch),
    (Precision.PRE_OR_RC, "pre-release/release candidate", _qualifier_key),
    (Precision.REVISION_MAJOR, "revision major", lambda v: v.revision_major),
    (Precision.REVISION_MINOR, "revision minor", lambda v: v.revision_minor),
)


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version, strict=False) if isinstance(version, str) else version


def compare_versions(
    version1: Union[str, Version],
    version2: Union[str, Version],
    precision: Precision = Precision.REVISION_MINOR,
) -> Comparison:
    """Compare two versions down to the requested precision.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        precision: Finest component to compare

    Returns:
        NEWER if version1 is newer than version2, OLDER if it is older,
        SAME if they agree on every component down to ``precision``

    Raises:
        PrecisionMismatchError: If exactly one side lacks a compared component
        ParseError: If either version string is invalid (strings are parsed leniently)

    Examples:
        >>> compare_versions("1.8-R0.1-SNAPSHOT", "1.9-R0.1-SNAPSHOT")
        <Comparison.OLDER: -1>
        >>> compare_versions("1.18-rc3-R0.1-SNAPSHOT", "1.18-R0.1-SNAPSHOT")
        <Comparison.OLDER: -1>
        >>> compare_versions("1.18-rc3-R0.1-SNAPSHOT", "1.18-R0.1-SNAPSHOT", Precision.MINOR)
        <Comparison.SAME: 0>
        >>> compare_versions("1.0", "b1.7.3")
        <Comparison.NEWER: 1>
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)
    precision = Precision(precision)

    if v1.beta != v2.beta:
        return Comparison.OLDER if v1.beta else Comparison.NEWER

    for level, name, extract in _COMPONENTS:
        if level > precision:
            break

        value1 = extract(v1)
        value2 = extract(v2)
        if value1 is None and value2 is None:
            continue
        if value1 is None:
            raise PrecisionMismatchError(v1.render_full(), component=name)
        if value2 is None:
            raise PrecisionMismatchError(v2.render_full(), component=name)

        if value1 != value2:
            return Comparison.NEWER if value1 > value2 else Comparison.OLDER

    return Comparison.SAME


def sort_versions(
    versions: Iterable[Union[str, Version]],
    precision: Precision = Precision.REVISION_MINOR,
    reverse: bool = False,
) -> list[Version]:
    """Sort versions oldest first (newest first with ``reverse``).

    The sort is stable, so versions that compare SAME at ``precision`` keep
    their input order.

    Examples:
        >>> [str(v) for v in sort_versions(["1.9-R0.1-SNAPSHOT", "1.8-R0.1-SNAPSHOT"])]
        ['1.8-R0.1-SNAPSHOT', '1.9-R0.1-SNAPSHOT']
    """
    parsed = [_coerce(version) for version in versions]
    key = functools.cmp_to_key(lambda a, b: int(compare_versions(a, b, precision)))
    return sorted(parsed, key=key, reverse=reverse)
