"""Async GitHub API client used to check for published releases."""

from __future__ import annotations

import httpx
import structlog

log = structlog.get_logger("updatescout.engine")

GITHUB_API_URL = "https://api.github.com"


class GitHubClient:
    """Thin async wrapper around the GitHub REST API.

    The token is injected by the caller; this class never reads the
    environment.
    """

    def __init__(
        self,
        token: str | None = None,
        timeout: float = 30.0,
        *,
        base_url: str = GITHUB_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"token {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def has_releases(self, owner: str, repo: str) -> bool:
        """Return True if ``owner/repo`` has at least one published release.

        Every failure (network, 404, rate limit, unexpected body) counts as
        "no releases". One request, no retries.
        """
        path = f"/repos/{owner}/{repo}/releases"
        try:
            response = await self._client.get(path, params={"per_page": 1})
        except httpx.HTTPError as exc:
            log.warning(
                "github.releases_lookup_failed",
                repo=f"{owner}/{repo}",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return False

        if response.status_code in (403, 429) and self._is_rate_limited(response):
            log.warning(
                "github.rate_limit",
                repo=f"{owner}/{repo}",
                reset=response.headers.get("X-RateLimit-Reset"),
            )
            return False

        if response.status_code != 200:
            log.info(
                "github.releases_lookup_failed",
                repo=f"{owner}/{repo}",
                status=response.status_code,
            )
            return False

        try:
            data = response.json()
        except ValueError:
            log.warning("github.releases_bad_body", repo=f"{owner}/{repo}")
            return False
        return isinstance(data, list) and len(data) > 0

    # ── internal ───────────────────────────────────────────────────────────

    @staticmethod
    def _is_rate_limited(response: httpx.Response) -> bool:
        """Check if a 403/429 response is due to rate limiting."""
        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None:
            try:
                return int(remaining) == 0
            except (ValueError, TypeError):
                pass
        # GitHub also uses Retry-After for secondary rate limits
        return "Retry-After" in response.headers
