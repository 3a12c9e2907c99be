# SPDX-License-Identifier: MIT
"""Bukkit API version parsing and comparison.

This package recognizes the version identifiers reported by Bukkit-family
game servers, models them as immutable values and orders them with a
caller-selected precision.

Example:
    >>> from bukkit_version import parse_version, compare_versions, Precision
    >>>
    >>> version = parse_version("1.18-rc3-R0.1-SNAPSHOT")
    >>> version.release_candidate
    3
    >>> version.render_plain()
    '1.18-rc3'
    >>>
    >>> compare_versions("1.18.1-R0.1-SNAPSHOT", "1.18.2-R0.1-SNAPSHOT", Precision.MINOR)
    <Comparison.SAME: 0>
"""

__version__ = "0.1.0"

from .errors import (
    BukkitVersionError,
    ParseError,
    MissingInputError,
    MalformedIdentifierError,
    NotABuildIdentifierError,
    ConstructionError,
    MissingRequiredFieldError,
    InvalidComponentError,
    ConflictingQualifiersError,
    PrecisionMismatchError,
)
from .grammar import (
    BUKKIT_VERSION_PATTERN,
    LEGACY_SERVER_PATTERN,
    SNAPSHOT_MARKER,
    IdentifierMatch,
    match_identifier,
    is_valid_identifier,
)
from .version import (
    FINAL_RANKING,
    RC_OFFSET,
    Version,
    parse_version,
    to_vanilla,
)
from .compare import (
    Comparison,
    Precision,
    RankingException,
    RANKING_EXCEPTIONS,
    compare_versions,
    effective_ranking,
    sort_versions,
)
from .host import (
    HostServer,
    describe_version,
    detect_and_log,
    detect_version,
    parse_legacy_server_version,
)

__all__ = [
    # Errors
    "BukkitVersionError",
    "ParseError",
    "MissingInputError",
    "MalformedIdentifierError",
    "NotABuildIdentifierError",
    "ConstructionError",
    "MissingRequiredFieldError",
    "InvalidComponentError",
    "ConflictingQualifiersError",
    "PrecisionMismatchError",
    # Grammar
    "BUKKIT_VERSION_PATTERN",
    "LEGACY_SERVER_PATTERN",
    "SNAPSHOT_MARKER",
    "IdentifierMatch",
    "match_identifier",
    "is_valid_identifier",
    # Version model
    "FINAL_RANKING",
    "RC_OFFSET",
    "Version",
    "parse_version",
    "to_vanilla",
    # Version comparison
    "Comparison",
    "Precision",
    "RankingException",
    "RANKING_EXCEPTIONS",
    "compare_versions",
    "effective_ranking",
    "sort_versions",
    # Host detection
    "HostServer",
    "describe_version",
    "detect_and_log",
    "detect_version",
    "parse_legacy_server_version",
]
