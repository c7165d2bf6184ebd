"""URL-keyed result cache with expiry.

Stores the unfiltered report of a previous run so repeat analyses
of the same URL can skip launching a browser.  Cache files are JSON
under the configured cache directory (``.cache/media-queries/`` by
default), one file per URL, named by the MD5 of the URL.

The cache is best-effort: an unreadable, corrupt or expired entry
is a miss, and a failed write is logged and otherwise ignored.
"""

from __future__ import annotations

import contextlib
import hashlib
import json
import pathlib
from datetime import UTC, datetime, timedelta
from typing import Any

import pydantic

from mediascope.utils import logger

log = logger.create_logger("ResultCache")

DEFAULT_TTL = timedelta(hours=24)


class CachedResult(pydantic.BaseModel):
    """One cached JSON blob with its expiry."""

    key: str
    stored_at: pydantic.AwareDatetime
    expires_at: pydantic.AwareDatetime
    value: Any


def cache_key(url: str) -> str:
    """Return the MD5 hex digest of *url*."""
    return hashlib.md5(url.encode("utf-8")).hexdigest()


class ResultCache:
    """File-backed JSON cache keyed by string.

    Args:
        directory: Where cache files live; created on first write.
        ttl: Expiry applied when :meth:`put` is called without one.
    """

    def __init__(self, directory: pathlib.Path, ttl: timedelta = DEFAULT_TTL) -> None:
        self._directory = directory
        self._ttl = ttl

    def _path(self, key: str) -> pathlib.Path:
        safe = "".join(c if c.isalnum() or c in ".-_" else "_" for c in key)[:100]
        return self._directory / f"{safe}.json"

    def get(self, key: str) -> Any | None:
        """Return the cached value for *key*, or ``None`` on a miss."""
        path = self._path(key)
        if not path.exists():
            log.debug("Cache miss", {"key": key})
            return None

        try:
            entry = CachedResult.model_validate(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as exc:
            log.warn("Failed to read cache entry, removing", {"key": key, "error": str(exc)})
            with contextlib.suppress(OSError):
                path.unlink(missing_ok=True)
            return None

        now = datetime.now(UTC)
        if entry.expires_at <= now:
            log.info("Cache expired", {"key": key, "expiredAt": entry.expires_at.isoformat()})
            return None

        age_minutes = round((now - entry.stored_at).total_seconds() / 60)
        log.success("Loaded from cache", {"key": key, "ageMinutes": age_minutes})
        return entry.value

    def put(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        """Store *value* (JSON-serialisable) under *key*. Never raises."""
        now = datetime.now(UTC)
        entry = CachedResult(key=key, stored_at=now, expires_at=now + (ttl or self._ttl), value=value)
        path = self._path(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(entry.model_dump_json(indent=2), encoding="utf-8")
            log.info("Cached results", {"key": key, "path": path.name})
        except (OSError, TypeError, ValueError) as exc:
            log.warn("Failed to write cache entry", {"key": key, "error": str(exc)})
