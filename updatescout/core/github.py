"""Repository URL utilities."""

from __future__ import annotations

import re

# ssh://git@host/owner/repo, git@host:owner/repo, git://host/owner/repo
_TRANSPORT_PATTERNS = (
    re.compile(r"^ssh://git@(?P<host>[^/]+)/(?P<path>.*)$"),
    re.compile(r"^git@(?P<host>[^:/]+):(?P<path>.*)$"),
    re.compile(r"^git://(?P<host>[^/]+)/(?P<path>.*)$"),
)

_GITHUB_HOSTS = ("github.com", "www.github.com")


def normalize_repo_url(repo_url: str) -> str:
    """Turn a registry ``repository.url`` into a browsable https URL.

    Strips a leading ``git+`` and a trailing ``.git``, then rewrites the
    three git transport forms to ``https://host/path``. Anything else is
    returned unchanged (apart from the prefix/suffix stripping).
    """
    url = repo_url.strip()
    if url.startswith("git+"):
        url = url[len("git+") :]
    if url.endswith(".git"):
        url = url[:-4]

    for pattern in _TRANSPORT_PATTERNS:
        match = pattern.match(url)
        if match:
            return f"https://{match.group('host')}/{match.group('path')}"
    return url


def extract_owner_repo(repo_url: str) -> tuple[str, str] | None:
    """Extract ``(owner, repo)`` from a GitHub web URL.

    Handles:
      - https://github.com/owner/repo
      - https://github.com/owner/repo/tree/main
      - any form accepted by :func:`normalize_repo_url`

    Returns None for other hosts or URLs without an owner/repo path.
    """
    url = normalize_repo_url(repo_url).rstrip("/")
    for scheme in ("https://", "http://"):
        if url.startswith(scheme):
            url = url[len(scheme) :]
            break
    else:
        return None

    host, _, path = url.partition("/")
    if host.lower() not in _GITHUB_HOSTS:
        return None

    parts = path.split("/")
    if len(parts) >= 2 and parts[0] and parts[1]:
        return parts[0], parts[1]
    return None
