"""Runtime settings and the priority-packages config file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

import structlog

from updatescout.exceptions import ConfigError

log = structlog.get_logger("updatescout.config")

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"
DEFAULT_REGISTRY_WEB_URL = "https://www.npmjs.com"
DEFAULT_PRIORITY_PACKAGES = ["react", "axios", "express"]
_DEFAULT_TIMEOUT = 30.0


@dataclass
class Settings:
    registry_url: str = DEFAULT_REGISTRY_URL
    registry_web_url: str = DEFAULT_REGISTRY_WEB_URL
    github_token: str | None = None
    timeout: float = _DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables.

        UPDATESCOUT_REGISTRY_URL     — registry API base (default: npmjs)
        UPDATESCOUT_REGISTRY_WEB_URL — registry website (default: npmjs.com)
        UPDATESCOUT_HTTP_TIMEOUT     — per-request timeout in seconds
        GITHUB_TOKEN                 — optional, raises GitHub rate limits
        """
        raw_timeout = os.environ.get("UPDATESCOUT_HTTP_TIMEOUT")
        timeout = _DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigError(
                    f"UPDATESCOUT_HTTP_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from exc

        return cls(
            registry_url=os.environ.get("UPDATESCOUT_REGISTRY_URL", DEFAULT_REGISTRY_URL),
            registry_web_url=os.environ.get(
                "UPDATESCOUT_REGISTRY_WEB_URL", DEFAULT_REGISTRY_WEB_URL
            ),
            github_token=os.environ.get("GITHUB_TOKEN") or None,
            timeout=timeout,
        )


def write_default_priority_config(path: Path) -> list[str]:
    """Write the default priority config to *path* and return its package list.

    A failed write is logged and the defaults are still returned.
    """
    config = {"priorityPackages": list(DEFAULT_PRIORITY_PACKAGES)}
    try:
        path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        log.warning("config.default_write_failed", path=str(path), error=str(exc))
    else:
        log.info("config.default_written", path=str(path))
    return list(DEFAULT_PRIORITY_PACKAGES)


def load_priority_packages(path: Path) -> list[str]:
    """Read ``priorityPackages`` from *path*, creating a default file if absent.

    A missing ``priorityPackages`` key means no priority packages.
    Raises :class:`ConfigError` on invalid JSON or a wrongly-typed list.
    """
    if not path.exists():
        return write_default_priority_config(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    packages = data.get("priorityPackages", [])
    if not isinstance(packages, list) or not all(isinstance(p, str) for p in packages):
        raise ConfigError(f"'priorityPackages' in {path} must be a list of package names")
    return packages
