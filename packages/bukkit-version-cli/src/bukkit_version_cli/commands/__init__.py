# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, vanilla, validate, compare, sort

__all__ = ["parse", "vanilla", "validate", "compare", "sort"]
