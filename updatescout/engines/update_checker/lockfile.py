"""Yarn lockfile parser and declared-name -> locked-version resolver."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from updatescout.engines.update_checker.models import LockedVersion
from updatescout.exceptions import LockfileParseError

log = structlog.get_logger("updatescout.engine")


# ── parsing ───────────────────────────────────────────────────────────────


def parse_yarn_lock(text: str) -> dict[str, dict[str, Any]]:
    """Parse yarn lockfile text into ``{compound_key: entry}``.

    Accepts both the classic ``field "value"`` lines and the ``field: value``
    form. A header listing several keys maps each of them to the same entry.
    Nested blocks such as ``dependencies:`` become sub-dicts.

    Raises :class:`LockfileParseError` on structurally invalid input.
    """
    entries: dict[str, dict[str, Any]] = {}
    # (indent of the line that opened the block, block dict)
    stack: list[tuple[int, dict[str, Any]]] = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "\t" in raw[: len(raw) - len(raw.lstrip())]:
            raise LockfileParseError("tab indentation is not allowed", line_no)

        indent = len(raw) - len(raw.lstrip(" "))

        if indent == 0:
            if not stripped.endswith(":"):
                raise LockfileParseError(f"expected entry header, got {stripped!r}", line_no)
            entry: dict[str, Any] = {}
            for key in _split_header_keys(stripped[:-1], line_no):
                entries[key] = entry
            stack = [(0, entry)]
            continue

        if not stack:
            raise LockfileParseError("field outside of any entry", line_no)

        while len(stack) > 1 and indent <= stack[-1][0]:
            stack.pop()
        parent = stack[-1][1]

        field, value = _split_field(stripped, line_no)
        if value is None:
            child: dict[str, Any] = {}
            parent[field] = child
            stack.append((indent, child))
        else:
            parent[field] = value

    return entries


def _split_header_keys(header: str, line_no: int) -> list[str]:
    if header.count('"') % 2:
        raise LockfileParseError("unterminated quote in entry header", line_no)
    keys = [k.strip() for k in header.replace('"', "").split(",")]
    keys = [k for k in keys if k]
    if not keys:
        raise LockfileParseError("empty entry header", line_no)
    return keys


def _split_field(line: str, line_no: int) -> tuple[str, str | None]:
    """Split an indented line into ``(field, value)``; value None opens a block."""
    if line.startswith('"'):
        end = line.find('"', 1)
        if end == -1:
            raise LockfileParseError("unterminated quote", line_no)
        field = line[1:end]
        rest = line[end + 1 :]
        if rest.startswith(":"):
            rest = rest[1:]
            if not rest.strip():
                return field, None
    else:
        field, _, rest = line.partition(" ")
        if field.endswith(":"):
            field = field[:-1]
            if not rest.strip():
                return field, None

    rest = rest.strip()
    if not rest:
        raise LockfileParseError(f"field {field!r} has no value", line_no)
    return field, _unquote(rest, line_no)


def _unquote(value: str, line_no: int) -> str:
    if value.startswith('"'):
        if len(value) < 2 or not value.endswith('"'):
            raise LockfileParseError("unterminated quote", line_no)
        return value[1:-1]
    return value


def load_lockfile(path: Path) -> dict[str, dict[str, Any]] | None:
    """Read and parse a lockfile.

    Returns None when the lockfile is unavailable (missing, unreadable or
    malformed); an empty dict means it parsed but has no entries.
    """
    if not path.is_file():
        log.info("lockfile.missing", path=str(path))
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("lockfile.read_failed", path=str(path), error=str(exc))
        return None
    try:
        return parse_yarn_lock(text)
    except LockfileParseError as exc:
        log.warning("lockfile.parse_failed", path=str(path), error=str(exc))
        return None


# ── resolution ────────────────────────────────────────────────────────────


def lock_key_name(key: str) -> str | None:
    """Return the package name of a ``name@range`` key (scoped names supported)."""
    idx = key.find("@", 1)
    if idx <= 0:
        return None
    return key[:idx]


def resolve_locked_versions(
    declared: dict[str, str],
    lock_entries: dict[str, dict[str, Any]],
) -> dict[str, str]:
    """Map each declared dependency name to its locked version.

    Tries the exact ``name@range`` key first, then scans every entry for a
    matching name and takes the first one in lockfile order. Names with no
    lock entry are left out of the result.
    """
    resolved: dict[str, str] = {}
    for name, declared_range in declared.items():
        locked = _lookup(name, declared_range, lock_entries)
        if locked is None:
            log.debug("lockfile.unresolved", package=name, declared=declared_range)
            continue
        resolved[locked.name] = locked.resolved_version
    return resolved


def _lookup(
    name: str,
    declared_range: str,
    lock_entries: dict[str, dict[str, Any]],
) -> LockedVersion | None:
    version = _entry_version(lock_entries.get(f"{name}@{declared_range}"))
    if version is not None:
        return LockedVersion(name=name, resolved_version=version)

    matches: list[tuple[str, str]] = []
    for key, entry in lock_entries.items():
        if lock_key_name(key) != name:
            continue
        entry_version = _entry_version(entry)
        if entry_version is not None:
            matches.append((key, entry_version))

    if not matches:
        return None

    distinct = {v for _, v in matches}
    if len(distinct) > 1:
        log.warning(
            "lockfile.ambiguous_name_match",
            package=name,
            declared=declared_range,
            candidates=sorted(distinct),
            chosen=matches[0][1],
        )
    return LockedVersion(name=name, resolved_version=matches[0][1])


def _entry_version(entry: Any) -> str | None:
    if not isinstance(entry, dict):
        return None
    version = entry.get("version")
    return version if isinstance(version, str) and version else None
