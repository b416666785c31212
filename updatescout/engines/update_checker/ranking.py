"""Ranking by version distance and priority partitioning."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from updatescout.engines.update_checker.models import UpdateRecord
from updatescout.engines.update_checker.version import version_distance


def rank_updates(updates: Iterable[UpdateRecord]) -> list[UpdateRecord]:
    """Sort by descending version distance; ties keep their input order."""
    return sorted(
        updates,
        key=lambda u: version_distance(u.current_version, u.latest_version),
        reverse=True,
    )


def partition_updates(
    updates: Iterable[UpdateRecord],
    priority_packages: Collection[str],
) -> tuple[list[UpdateRecord], list[UpdateRecord]]:
    """Split into ``(priority, other)`` by exact package name, preserving order."""
    priority: list[UpdateRecord] = []
    other: list[UpdateRecord] = []
    for update in updates:
        (priority if update.name in priority_packages else other).append(update)
    return priority, other


def rank_and_partition(
    updates: Iterable[UpdateRecord],
    priority_packages: Collection[str],
) -> tuple[list[UpdateRecord], list[UpdateRecord]]:
    return partition_updates(rank_updates(updates), set(priority_packages))
