"""
Bundled default TLD list.

Uses the Public Suffix List snapshot that ships inside tldextract, so the
default registry is usable without any network access. Only ICANN
top-level entries are kept; multi-label suffixes and wildcard or exception
rules are dropped. Internationalized entries are stored in their ASCII
"xn--" form, the only form a domain label can take.
"""

import logging
from functools import lru_cache

import idna
import tldextract

logger = logging.getLogger(__name__)


def _to_ascii(suffix: str) -> str | None:
    """Convert a suffix to lowercase ASCII (punycode for IDN entries)."""
    if suffix.isascii():
        return suffix.lower()
    try:
        return idna.encode(suffix).decode("ascii").lower()
    except idna.IDNAError as e:
        logger.debug(f"Skipping bundled TLD {suffix!r}: {e}")
        return None


@lru_cache(maxsize=1)
def bundled_tlds() -> frozenset[str]:
    """
    Get the bundled set of top-level domains (lowercase ASCII).

    Returns:
        Frozen set of TLD strings, e.g. {"com", "org", "uk", "xn--p1ai", ...}
    """
    # No cache dir and no URLs: read the packaged snapshot only
    extractor = tldextract.TLDExtract(
        cache_dir=None,
        suffix_list_urls=(),
        fallback_to_snapshot=True,
        include_psl_private_domains=False,
    )
    tlds = set()
    for suffix in extractor.tlds:
        if "." in suffix or suffix.startswith(("*", "!")):
            continue
        tld = _to_ascii(suffix)
        if tld:
            tlds.add(tld)
    logger.debug(f"Loaded {len(tlds):,} bundled TLDs")
    return frozenset(tlds)
