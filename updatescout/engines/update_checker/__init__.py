"""Update checker engine — find outdated dependencies and rank them."""

from updatescout.engines.update_checker.detector import UpdateDetector
from updatescout.engines.update_checker.doc_url import DocUrlResolver
from updatescout.engines.update_checker.github_client import GitHubClient
from updatescout.engines.update_checker.lockfile import (
    load_lockfile,
    parse_yarn_lock,
    resolve_locked_versions,
)
from updatescout.engines.update_checker.models import (
    DependencySpec,
    LockedVersion,
    RegistryInfo,
    ResolutionMode,
    UpdateRecord,
    UpdateReport,
)
from updatescout.engines.update_checker.ranking import (
    partition_updates,
    rank_and_partition,
    rank_updates,
)
from updatescout.engines.update_checker.registry_client import NpmRegistryClient
from updatescout.engines.update_checker.runner import check_dependencies, select_resolution
from updatescout.engines.update_checker.version import normalize_version, version_distance

__all__ = [
    "DependencySpec",
    "DocUrlResolver",
    "GitHubClient",
    "LockedVersion",
    "NpmRegistryClient",
    "RegistryInfo",
    "ResolutionMode",
    "UpdateDetector",
    "UpdateRecord",
    "UpdateReport",
    "check_dependencies",
    "load_lockfile",
    "normalize_version",
    "parse_yarn_lock",
    "partition_updates",
    "rank_and_partition",
    "rank_updates",
    "resolve_locked_versions",
    "select_resolution",
    "version_distance",
]
