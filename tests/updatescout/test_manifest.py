"""Tests for package.json loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from updatescout.engines.update_checker.manifest import build_dependency_specs, load_manifest
from updatescout.engines.update_checker.models import DependencySpec
from updatescout.exceptions import ManifestNotFoundError, ManifestParseError


def _write(tmp_path, data) -> Path:
    path = tmp_path / "package.json"
    path.write_text(json.dumps(data))
    return path


class TestLoadManifest:
    def test_merges_sections(self, tmp_path):
        path = _write(
            tmp_path,
            {"dependencies": {"react": "^18.0.0"}, "devDependencies": {"jest": "~29.0.0"}},
        )
        assert load_manifest(path) == {"react": "^18.0.0", "jest": "~29.0.0"}

    def test_dev_overrides_dependencies(self, tmp_path):
        path = _write(
            tmp_path,
            {"dependencies": {"react": "^17.0.0"}, "devDependencies": {"react": "^18.0.0"}},
        )
        assert load_manifest(path) == {"react": "^18.0.0"}

    def test_no_sections(self, tmp_path):
        assert load_manifest(_write(tmp_path, {"name": "app"})) == {}

    def test_non_string_range_skipped(self, tmp_path):
        path = _write(tmp_path, {"dependencies": {"a": "^1.0.0", "b": {"version": "1"}}})
        assert load_manifest(path) == {"a": "^1.0.0"}

    def test_non_object_section_ignored(self, tmp_path):
        path = _write(tmp_path, {"dependencies": ["a"], "devDependencies": {"b": "1.0.0"}})
        assert load_manifest(path) == {"b": "1.0.0"}

    def test_missing(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            load_manifest(tmp_path / "package.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{not json")
        with pytest.raises(ManifestParseError):
            load_manifest(path)

    def test_not_an_object(self, tmp_path):
        with pytest.raises(ManifestParseError):
            load_manifest(_write(tmp_path, ["react"]))


def test_build_dependency_specs():
    specs = build_dependency_specs({"react": "^18.0.0"})
    assert specs == [DependencySpec(name="react", declared_range="^18.0.0")]
