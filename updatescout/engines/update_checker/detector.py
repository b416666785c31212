"""Update detection: combine current, latest and doc URL per dependency."""

from __future__ import annotations

import asyncio

import structlog

from updatescout.engines.update_checker.doc_url import DocUrlResolver
from updatescout.engines.update_checker.models import UpdateRecord
from updatescout.engines.update_checker.registry_client import NpmRegistryClient
from updatescout.engines.update_checker.version import normalize_version

log = structlog.get_logger("updatescout.engine")


class UpdateDetector:
    """Look up every dependency concurrently and keep the outdated ones."""

    def __init__(self, registry: NpmRegistryClient, doc_resolver: DocUrlResolver) -> None:
        self._registry = registry
        self._doc_resolver = doc_resolver

    async def detect(self, dependencies: dict[str, str]) -> list[UpdateRecord]:
        """Return an :class:`UpdateRecord` for each dependency that is behind.

        Lookups run concurrently; a failing package is logged and dropped
        without affecting the rest. Output order is unspecified.
        """
        names = list(dependencies)
        results = await asyncio.gather(
            *(self._check(name, dependencies[name]) for name in names),
            return_exceptions=True,
        )

        updates: list[UpdateRecord] = []
        for name, result in zip(names, results, strict=True):
            if isinstance(result, BaseException):
                log.error(
                    "detector.package_failed",
                    package=name,
                    error_type=type(result).__name__,
                    error=str(result),
                )
                continue
            if result is not None:
                updates.append(result)

        log.info("detector.done", checked=len(names), outdated=len(updates))
        return updates

    async def _check(self, name: str, current: str) -> UpdateRecord | None:
        current_version = normalize_version(current)
        info = await self._registry.fetch(name)
        if info is None:
            return None
        if info.latest_version == current_version:
            log.debug("detector.up_to_date", package=name, version=current_version)
            return None

        doc_url = await self._doc_resolver.resolve(name, info)
        return UpdateRecord(
            name=name,
            current_version=current_version,
            latest_version=info.latest_version,
            doc_url=doc_url,
        )
