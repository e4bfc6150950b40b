"""
Flat TLD list fetching and parsing.

The list format is the one IANA publishes at
https://data.iana.org/TLD/tlds-alpha-by-domain.txt: one TLD per line, with
"#" comment lines. Sources may be http(s) URLs, file:// URIs, or paths.
"""

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from web_validate.constants import DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from web_validate.errors import RegistryError

logger = logging.getLogger(__name__)


def parse_tld_list(text: str) -> list[str]:
    """
    Parse a flat TLD list.

    Entries are stripped and lowercased (IANA publishes uppercase). Blank
    lines and "#" comments are skipped. Duplicates are dropped, order kept.

    Args:
        text: Raw list content

    Returns:
        List of TLD strings

    Raises:
        RegistryError: If an entry is malformed or the list is empty
    """
    tlds: list[str] = []
    seen: set[str] = set()
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "." in line or any(ch.isspace() for ch in line):
            raise RegistryError(f"Malformed TLD entry on line {line_number}: {line!r}")
        entry = line.lower()
        if entry not in seen:
            seen.add(entry)
            tlds.append(entry)

    if not tlds:
        raise RegistryError("TLD list is empty")
    return tlds


def _read_local(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Could not read TLD list from {path}: {e}") from e


def _fetch_remote(url: str, session: requests.Session, timeout: float) -> str:
    headers = {"User-Agent": USER_AGENT, "Accept": "text/plain"}
    try:
        response = session.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise RegistryError(f"Could not fetch TLD list from {url}: {e}") from e
    return response.text


def fetch_tld_list(
    source: str | Path,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> list[str]:
    """
    Fetch and parse a TLD list.

    Args:
        source: http(s) URL, file:// URI, or filesystem path
        session: Optional requests session (for connection pooling)
        timeout: HTTP timeout in seconds

    Returns:
        List of TLD strings

    Raises:
        RegistryError: On any fetch or parse failure
    """
    if isinstance(source, Path):
        text = _read_local(source)
    else:
        parsed = urlparse(source)
        if parsed.scheme in ("http", "https"):
            if session is None:
                session = requests.Session()
            logger.info(f"Fetching TLD list from {source}...")
            text = _fetch_remote(source, session, timeout)
        elif parsed.scheme == "file":
            text = _read_local(Path(unquote(parsed.path)))
        elif parsed.scheme and len(parsed.scheme) > 1:
            raise RegistryError(f"Unsupported TLD list source: {source}")
        else:
            # Plain path (a single-letter scheme is a Windows drive)
            text = _read_local(Path(source))

    tlds = parse_tld_list(text)
    logger.info(f"Parsed {len(tlds):,} TLDs from {source}")
    return tlds
