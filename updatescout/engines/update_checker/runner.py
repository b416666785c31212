"""Run orchestration: manifest + lockfile -> ranked, partitioned report."""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path
from typing import Any

import structlog

from updatescout.config import Settings
from updatescout.engines.update_checker.detector import UpdateDetector
from updatescout.engines.update_checker.doc_url import DocUrlResolver
from updatescout.engines.update_checker.github_client import GitHubClient
from updatescout.engines.update_checker.lockfile import load_lockfile, resolve_locked_versions
from updatescout.engines.update_checker.manifest import build_dependency_specs, load_manifest
from updatescout.engines.update_checker.models import DependencySpec, ResolutionMode, UpdateReport
from updatescout.engines.update_checker.ranking import rank_and_partition
from updatescout.engines.update_checker.registry_client import NpmRegistryClient

log = structlog.get_logger("updatescout.engine")


def select_resolution(
    specs: list[DependencySpec],
    lock_entries: dict[str, dict[str, Any]] | None,
) -> tuple[ResolutionMode, dict[str, str]]:
    """Pick the run-wide resolution mode and the dependency map it yields.

    A parsed lockfile (even an empty one) selects ``LOCKFILE``; an
    unavailable one (None) falls back to the declared ranges.
    """
    declared = {spec.name: spec.declared_range for spec in specs}
    if lock_entries is None:
        return ResolutionMode.MANIFEST, declared
    return ResolutionMode.LOCKFILE, resolve_locked_versions(declared, lock_entries)


async def check_dependencies(
    manifest_path: Path,
    lockfile_path: Path,
    priority_packages: Collection[str],
    settings: Settings,
    *,
    registry: NpmRegistryClient | None = None,
    github: GitHubClient | None = None,
) -> UpdateReport:
    """Full pipeline: read manifest -> pick resolution -> detect -> rank -> partition.

    *registry* and *github* may be supplied (e.g. fakes in tests); otherwise
    clients are built from *settings* and closed on exit.

    Raises :class:`ManifestNotFoundError` / :class:`ManifestParseError`;
    everything per-package is absorbed.
    """
    specs = build_dependency_specs(load_manifest(manifest_path))
    lock_entries = load_lockfile(lockfile_path)
    mode, dependencies = select_resolution(specs, lock_entries)
    source = lockfile_path.name if mode is ResolutionMode.LOCKFILE else manifest_path.name
    log.info("runner.start", mode=mode.value, source=source, dependencies=len(dependencies))

    owns_registry = registry is None
    owns_github = github is None
    if registry is None:
        registry = NpmRegistryClient(settings.registry_url, timeout=settings.timeout)
    if github is None:
        github = GitHubClient(token=settings.github_token, timeout=settings.timeout)

    try:
        detector = UpdateDetector(registry, DocUrlResolver(github, settings.registry_web_url))
        updates = await detector.detect(dependencies)
    finally:
        if owns_registry:
            await registry.close()
        if owns_github:
            await github.close()

    priority, other = rank_and_partition(updates, priority_packages)
    return UpdateReport(
        mode=mode,
        source=source,
        priority_updates=priority,
        other_updates=other,
    )
