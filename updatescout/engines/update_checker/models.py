"""Data models for the update checker engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ResolutionMode(enum.Enum):
    """Where current versions come from for a whole run."""

    LOCKFILE = "lockfile"
    MANIFEST = "manifest"


@dataclass(frozen=True)
class DependencySpec:
    """A dependency as declared in the manifest."""

    name: str
    declared_range: str


@dataclass(frozen=True)
class LockedVersion:
    """A dependency's concrete version taken from the lockfile."""

    name: str
    resolved_version: str


@dataclass(frozen=True)
class RegistryInfo:
    """The subset of a registry package document we care about."""

    latest_version: str
    repository_url: str | None = None
    homepage_url: str | None = None


@dataclass(frozen=True)
class UpdateRecord:
    """A dependency whose current version differs from the registry latest."""

    name: str
    current_version: str
    latest_version: str
    doc_url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "currentVersion": self.current_version,
            "latestVersion": self.latest_version,
            "docUrl": self.doc_url,
        }


@dataclass
class UpdateReport:
    """Ranked, partitioned output of one run."""

    mode: ResolutionMode
    source: str
    priority_updates: list[UpdateRecord] = field(default_factory=list)
    other_updates: list[UpdateRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.priority_updates) + len(self.other_updates)
