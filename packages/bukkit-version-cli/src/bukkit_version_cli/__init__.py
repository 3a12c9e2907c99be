# SPDX-License-Identifier: MIT
"""Command line interface for Bukkit API version identifiers."""

__version__ = "0.1.0"
