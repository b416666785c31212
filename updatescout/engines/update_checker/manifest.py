"""Reader for ``package.json`` manifests."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from updatescout.engines.update_checker.models import DependencySpec
from updatescout.exceptions import ManifestNotFoundError, ManifestParseError

log = structlog.get_logger("updatescout.engine")

_DEP_SECTIONS = ("dependencies", "devDependencies")


def load_manifest(path: Path) -> dict[str, str]:
    """Return the merged ``dependencies`` + ``devDependencies`` map of a manifest.

    ``devDependencies`` entries override ``dependencies`` entries with the
    same name. Non-string ranges (workspace objects and the like) are skipped.

    Raises :class:`ManifestNotFoundError` if *path* does not exist and
    :class:`ManifestParseError` if it cannot be read as a JSON object.
    """
    if not path.is_file():
        raise ManifestNotFoundError(str(path))

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestParseError(f"{path} must contain a JSON object")

    merged: dict[str, str] = {}
    for section in _DEP_SECTIONS:
        deps = data.get(section) or {}
        if not isinstance(deps, dict):
            log.warning("manifest.section_ignored", section=section, path=str(path))
            continue
        for name, declared in deps.items():
            if not isinstance(declared, str):
                log.debug("manifest.range_ignored", package=name, section=section)
                continue
            merged[name] = declared
    return merged


def build_dependency_specs(declared: dict[str, str]) -> list[DependencySpec]:
    return [DependencySpec(name=name, declared_range=rng) for name, rng in declared.items()]
