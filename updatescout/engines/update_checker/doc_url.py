"""Release-notes / documentation URL resolution."""

from __future__ import annotations

from urllib.parse import quote

import structlog

from updatescout.config import DEFAULT_REGISTRY_WEB_URL
from updatescout.core.github import extract_owner_repo, normalize_repo_url
from updatescout.engines.update_checker.github_client import GitHubClient
from updatescout.engines.update_checker.models import RegistryInfo

log = structlog.get_logger("updatescout.engine")


def registry_versions_url(name: str, registry_web_url: str = DEFAULT_REGISTRY_WEB_URL) -> str:
    """The registry website's versions tab for *name*."""
    return f"{registry_web_url.rstrip('/')}/package/{quote(name, safe='@/')}?activeTab=versions"


class DocUrlResolver:
    """Pick the most useful link for reviewing an upgrade.

    Fallback chain, first hit wins:
      1. the GitHub releases page, if the repository publishes releases
      2. the package homepage
      3. the registry website's versions tab
    """

    def __init__(
        self,
        github: GitHubClient,
        registry_web_url: str = DEFAULT_REGISTRY_WEB_URL,
    ) -> None:
        self._github = github
        self._registry_web_url = registry_web_url

    async def resolve(self, name: str, info: RegistryInfo) -> str:
        if info.repository_url:
            releases_url = await self._releases_url(info.repository_url)
            if releases_url is not None:
                return releases_url

        if info.homepage_url:
            return info.homepage_url

        return registry_versions_url(name, self._registry_web_url)

    async def _releases_url(self, repository_url: str) -> str | None:
        repo_url = normalize_repo_url(repository_url)
        owner_repo = extract_owner_repo(repo_url)
        if owner_repo is None:
            log.debug("doc_url.releases_check_skipped", repo_url=repo_url)
            return None
        owner, repo = owner_repo
        if not await self._github.has_releases(owner, repo):
            return None
        return f"https://github.com/{owner}/{repo}/releases"
