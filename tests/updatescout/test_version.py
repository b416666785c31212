"""Tests for version normalization and the distance metric."""

from __future__ import annotations

import pytest

from updatescout.engines.update_checker.version import (
    normalize_version,
    parse_version,
    version_distance,
)


class TestNormalizeVersion:
    @pytest.mark.parametrize(
        ("declared", "expected"),
        [
            ("^1.2.0", "1.2.0"),
            ("~1.2.0", "1.2.0"),
            ("1.2.0", "1.2.0"),
            (">=1.0.0", ">=1.0.0"),
            ("1.x", "1.x"),
            ("^1.0.0 || ^2.0.0", "1.0.0 || ^2.0.0"),
            ("", ""),
        ],
    )
    def test_normalize(self, declared, expected):
        assert normalize_version(declared) == expected

    @pytest.mark.parametrize("declared", ["^1.2.0", "~0.4.1", "3.0.0", ">=2", "latest"])
    def test_idempotent(self, declared):
        once = normalize_version(declared)
        assert normalize_version(once) == once


class TestParseVersion:
    def test_plain(self):
        assert parse_version("1.2.3") == (1, 2, 3)

    def test_leading_v(self):
        assert parse_version("v10.0.1") == (10, 0, 1)

    def test_prerelease_and_build(self):
        assert parse_version("2.0.0-beta.1+build.5") == (2, 0, 0)

    @pytest.mark.parametrize("bad", ["1.2", "01.2.3", "latest", "^1.2.3", "1.2.3.4", ""])
    def test_invalid(self, bad):
        assert parse_version(bad) is None


class TestVersionDistance:
    def test_major(self):
        assert version_distance("1.0.0", "3.0.0") == 20000

    def test_minor_with_patch_reset(self):
        assert version_distance("1.2.3", "1.3.0") == 97

    def test_patch(self):
        assert version_distance("1.0.0", "1.0.5") == 5

    def test_downgrade_is_negative(self):
        assert version_distance("2.0.0", "1.9.9") < 0

    def test_unparseable_is_zero(self):
        assert version_distance("^1.0.0", "2.0.0") == 0
        assert version_distance("1.0.0", "next") == 0
