# SPDX-License-Identifier: MIT
"""Unit tests for identifier grammar recognition."""

import pytest

from bukkit_version import (
    MalformedIdentifierError,
    MissingInputError,
    NotABuildIdentifierError,
    is_valid_identifier,
    match_identifier,
)


class TestMatchIdentifier:
    """Tests for match_identifier function."""

    def test_revision_without_patch(self):
        """Test capturing major, minor and both revision parts."""
        match = match_identifier("1.8-R0.1-SNAPSHOT")
        assert match.beta is False
        assert match.major == "1"
        assert match.minor == "8"
        assert match.patch is None
        assert match.revision_major == "0"
        assert match.revision_minor == "1"
        assert match.is_build is True

    def test_patch_and_revision(self):
        """Test capturing a patch number."""
        match = match_identifier("1.9.4-R0.1-SNAPSHOT")
        assert match.patch == "4"

    def test_prerelease_without_revision(self):
        """Test capturing a pre-release with no revision suffix."""
        match = match_identifier("1.12-pre3-SNAPSHOT")
        assert match.prerelease == "3"
        assert match.release_candidate is None
        assert match.revision_major is None

    def test_release_candidate(self):
        """Test capturing a multi-digit release candidate."""
        match = match_identifier("1.18-rc12-R0.1-SNAPSHOT")
        assert match.release_candidate == "12"
        assert match.prerelease is None

    def test_revision_major_only(self):
        """Test a revision without a minor part."""
        match = match_identifier("1.4.7-R1-SNAPSHOT")
        assert match.revision_major == "1"
        assert match.revision_minor is None

    def test_beta_prefix(self):
        """Test that a leading b sets the beta flag."""
        match = match_identifier("b1.7.3", strict=False)
        assert match.beta is True
        assert match.major == "1"
        assert match.minor == "7"
        assert match.patch == "3"

    def test_bare_major_lenient(self):
        """Test that a bare major number matches leniently."""
        match = match_identifier("1", strict=False)
        assert match.major == "1"
        assert match.minor is None

    def test_raw_is_kept(self):
        """Test that the matched string is kept on the result."""
        assert match_identifier("1.14.3-SNAPSHOT").raw == "1.14.3-SNAPSHOT"


class TestMalformedIdentifiers:
    """Tests for strings that do not match the grammar."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            " ",
            "1.8-R0.1-SNAPSHOT ",
            " 1.8-R0.1-SNAPSHOT",
            "1.8-R0.1-SNAPSHOTX",
            "1.8-R0.1-SNAPSHOT\n",
            "1.12-pre12-SNAPSHOT",
            "1.12-pre-SNAPSHOT",
            "1.12-pre3-rc1-SNAPSHOT",
            "1.12-rc1-pre3-SNAPSHOT",
            "1.8-R10.1-SNAPSHOT",
            "1.8-R0.12-SNAPSHOT",
            "1.8-R0-1-SNAPSHOT",
            "1-SNAPSHOT",
            "1-pre1",
            "1.2.3.4",
            "v1.8",
            "a1.8",
            "1.x",
            "-1.8",
            "１.８",
        ],
    )
    def test_malformed(self, raw):
        """Test that strings outside the grammar are rejected."""
        with pytest.raises(MalformedIdentifierError):
            match_identifier(raw)

    def test_malformed_lenient(self):
        """Test that lenient mode does not relax the grammar itself."""
        with pytest.raises(MalformedIdentifierError):
            match_identifier("1.8-garbage", strict=False)

    def test_non_string_input(self):
        """Test that non-string input is malformed."""
        with pytest.raises(MalformedIdentifierError, match="must be a string"):
            match_identifier(18)  # type: ignore

    def test_none_input(self):
        """Test that None is reported as missing input."""
        with pytest.raises(MissingInputError, match="null version string"):
            match_identifier(None)

    def test_missing_input_is_not_malformed(self):
        """Test that missing input is a distinct error kind."""
        with pytest.raises(MissingInputError) as exc_info:
            match_identifier(None, strict=False)
        assert not isinstance(exc_info.value, MalformedIdentifierError)


class TestStrictMode:
    """Tests for the build-channel marker requirement."""

    def test_plain_version_strict(self):
        """Test that a plain version is not a build identifier."""
        with pytest.raises(NotABuildIdentifierError, match="1.12.2"):
            match_identifier("1.12.2")

    def test_plain_version_lenient(self):
        """Test that a plain version is accepted leniently."""
        match = match_identifier("1.12.2", strict=False)
        assert match.is_build is False
        assert match.patch == "2"

    def test_revision_without_marker_lenient(self):
        """Test that the revision suffix is allowed without the marker."""
        match = match_identifier("1.16.5-R0.1", strict=False)
        assert match.revision_major == "0"
        assert match.is_build is False

    def test_build_identifier_lenient(self):
        """Test that lenient mode still accepts the marker."""
        assert match_identifier("1.8-R0.1-SNAPSHOT", strict=False).is_build is True


class TestIsValidIdentifier:
    """Tests for is_valid_identifier function."""

    def test_valid_strict(self):
        assert is_valid_identifier("1.18-rc3-R0.1-SNAPSHOT") is True

    def test_plain_strict(self):
        assert is_valid_identifier("1.12.2") is False

    def test_plain_lenient(self):
        assert is_valid_identifier("1.12.2", strict=False) is True

    def test_empty(self):
        assert is_valid_identifier("", strict=False) is False

    def test_none(self):
        assert is_valid_identifier(None) is False  # type: ignore

    def test_non_string(self):
        assert is_valid_identifier(1.8, strict=False) is False  # type: ignore
