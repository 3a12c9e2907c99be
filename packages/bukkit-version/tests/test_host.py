# SPDX-License-Identifier: MIT
"""Tests for detecting the version of a running server."""

from __future__ import annotations

import logging

import pytest

from bukkit_version import (
    MalformedIdentifierError,
    MissingInputError,
    NotABuildIdentifierError,
    Version,
    describe_version,
    detect_and_log,
    detect_version,
    parse_legacy_server_version,
)


class ModernServer:
    """A host that reports its Bukkit API version."""

    def __init__(self, bukkit_version: str | None) -> None:
        self.bukkit_version = bukkit_version

    def get_bukkit_version(self) -> str | None:
        return self.bukkit_version

    def get_version(self) -> str:
        return f"git-Paper-196 (MC: {self.bukkit_version})"


class LegacyServer:
    """A pre-1.0 host with only a free-form server version."""

    def __init__(self, version: str) -> None:
        self.version = version

    def get_version(self) -> str:
        return self.version


class TestParseLegacyServerVersion:
    """Tests for parse_legacy_server_version function."""

    def test_with_patch(self):
        v = parse_legacy_server_version("git-Bukkit-0.0.0-1060-g7c8d2e5-b1060jnks (MC: 1.7.3)")
        assert v == Version(1, 7, 3, beta=True)
        assert v.render_plain() == "b1.7.3"

    def test_without_patch(self):
        v = parse_legacy_server_version("CraftBukkit (MC: 1.8)")
        assert v.beta is True
        assert v.major == 1
        assert v.minor == 8
        assert v.patch is None

    def test_no_suffix(self):
        with pytest.raises(MalformedIdentifierError, match="unhandled beta version"):
            parse_legacy_server_version("CraftBukkit")

    def test_two_digit_minor(self):
        with pytest.raises(MalformedIdentifierError):
            parse_legacy_server_version("CraftBukkit (MC: 1.12)")

    def test_trailing_text(self):
        with pytest.raises(MalformedIdentifierError):
            parse_legacy_server_version("CraftBukkit (MC: 1.7.3) extra")

    def test_none(self):
        with pytest.raises(MissingInputError):
            parse_legacy_server_version(None)


class TestDetectVersion:
    """Tests for detect_version function."""

    def test_modern_host(self):
        v = detect_version(ModernServer("1.18-rc3-R0.1-SNAPSHOT"))
        assert v.release_candidate == 3

    def test_modern_host_is_strict(self):
        with pytest.raises(NotABuildIdentifierError):
            detect_version(ModernServer("1.12.2"))

    def test_modern_host_without_version(self):
        with pytest.raises(MissingInputError):
            detect_version(ModernServer(None))

    def test_legacy_host(self):
        v = detect_version(LegacyServer("CraftBukkit (MC: 1.7.3)"))
        assert v.render_plain() == "b1.7.3"

    def test_unknown_host(self):
        with pytest.raises(MissingInputError, match="cannot find a server version"):
            detect_version(object())


class TestDetectAndLog:
    """Tests for detect_and_log function."""

    def test_logs_detected_version(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="bukkit_version.host"):
            v = detect_and_log(ModernServer("1.8-R0.1-SNAPSHOT"))

        assert v is not None
        assert "Detected Minecraft 1.8, implementing Bukkit API 1.8-R0.1-SNAPSHOT" in caplog.text

    def test_failure_returns_none(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING, logger="bukkit_version.host"):
            v = detect_and_log(LegacyServer("CraftBukkit"))

        assert v is None
        assert "Failed to detect Bukkit API version" in caplog.text

    def test_custom_logger(self, caplog: pytest.LogCaptureFixture):
        log = logging.getLogger("test.plugin")
        with caplog.at_level(logging.INFO, logger="test.plugin"):
            detect_and_log(ModernServer("1.14.3-SNAPSHOT"), log)

        assert [r.name for r in caplog.records] == ["test.plugin"]

    def test_describe_version(self):
        v = Version(1, 12, prerelease=3)
        assert describe_version(v) == "Detected Minecraft 1.12-pre3, implementing Bukkit API 1.12-pre3-SNAPSHOT"
