"""
On-disk cache for fetched TLD lists, using diskcache.

Lists are stored under a namespaced key per source, so a registry can be
restored from the last successful refresh without network access.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import diskcache

from web_validate.constants import TLD_CACHE_NAMESPACE

logger = logging.getLogger(__name__)


class TLDCache:
    """TLD list cache (SQLite-backed via diskcache)."""

    def __init__(
        self,
        cache_dir: Path,
        timeout: float = 30.0,
        namespace: str = TLD_CACHE_NAMESPACE,
    ):
        """
        Initialize cache.

        Args:
            cache_dir: Directory for cache files (Settings.cache_dir)
            timeout: Timeout in seconds for acquiring the database lock
            namespace: Key prefix separating TLD lists from other entries
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.namespace = namespace
        self._cache = diskcache.Cache(str(self.cache_dir), timeout=timeout)

    def _make_key(self, source: str) -> str:
        return f"{self.namespace}:{source}"

    def get_list(self, source: str) -> list[str] | None:
        """Get the cached TLD list for a source, or None if missing/expired."""
        entry = self._cache.get(self._make_key(source))
        if not entry:
            return None
        return list(entry["tlds"])

    def get_entry(self, source: str) -> dict[str, Any] | None:
        """Get the raw cached entry (tlds, fetched_at) for a source."""
        return self._cache.get(self._make_key(source))

    def set_list(self, source: str, tlds: list[str], ttl_days: int | None = None) -> None:
        """Store a TLD list with optional TTL."""
        expire = ttl_days * 86400 if ttl_days else None
        entry = {
            "tlds": list(tlds),
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        self._cache.set(self._make_key(source), entry, expire=expire)
        logger.debug(f"Cached {len(tlds):,} TLDs for {source}")

    def delete(self, source: str) -> bool:
        """Delete the cached list for a source."""
        return bool(self._cache.delete(self._make_key(source)))

    def sources(self) -> list[str]:
        """List sources that have a cached TLD list."""
        prefix = f"{self.namespace}:"
        return [key[len(prefix) :] for key in self._cache if key.startswith(prefix)]

    def clear(self) -> int:
        """Remove every cached TLD list. Returns the number removed."""
        sources = self.sources()
        for source in sources:
            self.delete(source)
        return len(sources)

    def stats(self) -> dict:
        """Get cache statistics."""
        by_source = {}
        for source in self.sources():
            entry = self.get_entry(source)
            if entry:
                by_source[source] = {
                    "count": len(entry["tlds"]),
                    "fetched_at": entry["fetched_at"],
                }
        return {
            "total": len(by_source),
            "by_source": by_source,
            "size_mb": round(self._cache.volume() / (1024 * 1024), 2),
            "cache_dir": str(self.cache_dir),
        }

    def close(self):
        """Close the cache."""
        self._cache.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
