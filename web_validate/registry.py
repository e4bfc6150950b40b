"""
TLD registry: the set of recognized top-level domains.

The registry holds an immutable snapshot that is swapped wholesale on
refresh. Readers grab the current snapshot reference once and never lock,
so a lookup running alongside a refresh sees either the old set or the new
one in full. Refreshes are serialized with a lock; a failed refresh leaves
the current snapshot in place.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

import diskcache

from web_validate.constants import BUNDLED_SOURCE, DEFAULT_REQUEST_TIMEOUT
from web_validate.errors import RegistryError
from web_validate.sources.bundled import bundled_tlds
from web_validate.sources.tld_list import fetch_tld_list

if TYPE_CHECKING:
    import requests

    from web_validate.cache import TLDCache
    from web_validate.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TLDSnapshot:
    """An immutable set of TLDs and where it came from."""

    entries: frozenset[str]
    source: str
    loaded_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __len__(self) -> int:
        return len(self.entries)


class TLDRegistry:
    """
    Recognized TLDs, with lookup and all-or-nothing refresh.

    Lookups are exact: no case folding is applied. Lists loaded through
    parse_tld_list are lowercase, so "COM" is not recognized.

    Args:
        entries: Initial TLDs (default: bundled list)
        source: Label for where the initial entries came from
        cache: Optional TLDCache; successful refreshes are written through
        cache_ttl_days: TTL for cached lists (None = no expiry)
        timeout: HTTP timeout for refreshes
    """

    def __init__(
        self,
        entries: Iterable[str] | None = None,
        source: str = BUNDLED_SOURCE,
        cache: TLDCache | None = None,
        cache_ttl_days: int | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        if entries is None:
            entries = bundled_tlds()
        self._snapshot = TLDSnapshot(frozenset(entries), str(source))
        self._refresh_lock = threading.Lock()
        self.cache = cache
        self.cache_ttl_days = cache_ttl_days
        self.timeout = timeout

    @property
    def snapshot(self) -> TLDSnapshot:
        """The current snapshot (never mutated after creation)."""
        return self._snapshot

    @property
    def source(self) -> str:
        """Where the current entries were loaded from."""
        return self._snapshot.source

    def contains(self, label: str | bytes) -> bool:
        """Return True if label is a recognized TLD (exact match)."""
        if isinstance(label, (bytes, bytearray)):
            try:
                label = bytes(label).decode("ascii")
            except UnicodeDecodeError:
                return False
        return label in self._snapshot.entries

    def __contains__(self, label) -> bool:
        if not isinstance(label, (str, bytes, bytearray)):
            return False
        return self.contains(label)

    def __len__(self) -> int:
        return len(self._snapshot)

    def replace(self, entries: Iterable[str], source: str | Path) -> TLDSnapshot:
        """
        Install a new entry set.

        Raises:
            RegistryError: If entries is empty
        """
        snapshot = TLDSnapshot(frozenset(entries), str(source))
        if not snapshot.entries:
            raise RegistryError(f"Refusing to load an empty TLD list from {source}")
        with self._refresh_lock:
            self._snapshot = snapshot
        return snapshot

    def refresh(
        self,
        source: str | Path,
        session: requests.Session | None = None,
    ) -> int:
        """
        Fetch a TLD list and replace the entire entry set with it.

        Args:
            source: http(s) URL, file:// URI, or filesystem path
            session: Optional requests session

        Returns:
            Number of TLDs now loaded

        Raises:
            RegistryError: If fetching or parsing fails; current entries are kept
        """
        with self._refresh_lock:
            try:
                tlds = fetch_tld_list(source, session=session, timeout=self.timeout)
            except RegistryError as e:
                logger.warning(f"TLD refresh from {source} failed, keeping {self.source}: {e}")
                raise
            self._snapshot = TLDSnapshot(frozenset(tlds), str(source))

        logger.info(f"Loaded {len(tlds):,} TLDs from {source}")
        if self.cache is not None:
            try:
                self.cache.set_list(str(source), tlds, ttl_days=self.cache_ttl_days)
            except (diskcache.Timeout, OSError) as e:
                # The new entries are live; only persistence failed
                logger.warning(f"Could not cache TLD list for {source}: {e}")
        return len(tlds)

    def load_cached(self, source: str | Path) -> bool:
        """
        Replace the entry set with a cached list for source, if one exists.

        Returns:
            True if a cached list was loaded, False otherwise
        """
        if self.cache is None:
            return False
        tlds = self.cache.get_list(str(source))
        if not tlds:
            return False
        self.replace(tlds, source)
        logger.info(f"Loaded {len(tlds):,} cached TLDs for {source}")
        return True

    def __repr__(self):
        return f"<TLDRegistry source={self.source!r} entries={len(self)}>"


def build_registry(settings: Settings | None = None) -> TLDRegistry:
    """
    Build a registry from settings.

    Starts from the bundled list, then loads the cached list for the
    configured source if caching is enabled and one is present.
    """
    if settings is None:
        from web_validate.config import get_settings

        settings = get_settings()

    cache = None
    if settings.use_cache:
        from web_validate.cache import TLDCache

        cache = TLDCache(settings.cache_dir)

    registry = TLDRegistry(
        cache=cache,
        cache_ttl_days=settings.cache_ttl_days or None,
        timeout=settings.request_timeout,
    )
    registry.load_cached(settings.tld_source_url)
    return registry


_default_registry: TLDRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> TLDRegistry:
    """
    Get the shared bundled-list registry used when none is passed in.

    Applications that refresh TLDs should build their own registry and pass
    it to the validator explicitly.
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = TLDRegistry()
    return _default_registry
