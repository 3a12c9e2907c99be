# SPDX-License-Identifier: MIT
"""Exception hierarchy for Bukkit version parsing, construction and comparison."""

from __future__ import annotations

from typing import Any


class BukkitVersionError(Exception):
    """Base class for every error raised by this package."""

    default_message = "Invalid Bukkit version"

    def __init__(self, version: Any = None, message: str = ""):
        self.version = version
        self.message = message or f"{self.default_message}: {version}"
        super().__init__(self.message)


class ParseError(BukkitVersionError):
    """Raised when a raw identifier cannot be turned into a Version."""


class MissingInputError(ParseError):
    """Raised when no version string was supplied at all."""

    def __init__(self, version: Any = None, message: str = ""):
        super().__init__(version, message or "null version string")


class MalformedIdentifierError(ParseError):
    """Raised when a string does not match the identifier grammar."""

    default_message = "invalid vanilla version"


class NotABuildIdentifierError(ParseError):
    """Raised in strict mode when the -SNAPSHOT marker is missing."""

    default_message = "invalid Bukkit API version"


class ConstructionError(BukkitVersionError):
    """Raised when explicit components do not form a valid Version."""


class MissingRequiredFieldError(ConstructionError):
    """Raised when major/minor is absent or a nested component lacks its parent."""

    default_message = "missing required version component"


class InvalidComponentError(ConstructionError):
    """Raised when a component is negative or a single-digit component exceeds 9."""

    default_message = "invalid version component"


class ConflictingQualifiersError(ConstructionError):
    """Raised when both a pre-release and a release candidate are given."""

    def __init__(self, version: Any = None, message: str = ""):
        super().__init__(
            version,
            message or "pre-releases and release candidates are mutually exclusive",
        )


class PrecisionMismatchError(BukkitVersionError):
    """Raised when only one side of a comparison has the component being compared."""

    def __init__(self, version: Any = None, message: str = "", component: str = ""):
        self.component = component
        super().__init__(
            version,
            message or f"cannot compare {component or 'component'}: missing on {version}",
        )
