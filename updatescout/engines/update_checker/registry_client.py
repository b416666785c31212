"""Async npm registry client."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from updatescout.config import DEFAULT_REGISTRY_URL
from updatescout.engines.update_checker.models import RegistryInfo
from updatescout.exceptions import RegistryError

log = structlog.get_logger("updatescout.engine")


class NpmRegistryClient:
    """Thin async wrapper around the npm registry package-document endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_REGISTRY_URL,
        timeout: float = 30.0,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> NpmRegistryClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def get_package(self, name: str) -> dict[str, Any]:
        """GET the full package document for *name*.

        Raises ``httpx.HTTPError`` on transport or status errors and
        ``ValueError`` if the body is not JSON.
        """
        response = await self._client.get(f"/{package_path(name)}")
        response.raise_for_status()
        return response.json()

    async def fetch(self, name: str) -> RegistryInfo | None:
        """Return :class:`RegistryInfo` for *name*, or None if it is unavailable.

        Any failure is logged and swallowed so one package never aborts
        a batch. No retries.
        """
        try:
            document = await self.get_package(name)
            return parse_package_document(document)
        except (httpx.HTTPError, ValueError, RegistryError) as exc:
            log.warning(
                "registry.fetch_failed",
                package=name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return None


def package_path(name: str) -> str:
    """URL path segment for a package; scoped names keep ``@`` but encode ``/``."""
    return quote(name, safe="@")


def parse_package_document(document: Any) -> RegistryInfo:
    """Extract latest version, repository URL and homepage from a package document."""
    if not isinstance(document, dict):
        raise RegistryError("package document is not a JSON object")

    dist_tags = document.get("dist-tags")
    latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
    if not isinstance(latest, str) or not latest:
        raise RegistryError("package document has no dist-tags.latest")

    repository = document.get("repository")
    if isinstance(repository, dict):
        repository_url = repository.get("url")
    else:
        repository_url = repository
    if not isinstance(repository_url, str) or not repository_url:
        repository_url = None

    homepage = document.get("homepage")
    if not isinstance(homepage, str) or not homepage:
        homepage = None

    return RegistryInfo(
        latest_version=latest,
        repository_url=repository_url,
        homepage_url=homepage,
    )
