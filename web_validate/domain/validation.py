"""
Domain name validation.

Checks a candidate in fixed stages and stops at the first failure:

1. Total length (scalar values, default cap 255)
2. Label split on "." (at most 128 labels)
3. Subdomain count bounds (labels excluding the TLD)
4. Per-label checks: non-empty, at most 63 scalar values, no leading or
   trailing hyphen, only [A-Za-z0-9-], well-formed UTF-8
5. TLD recognized by the registry

Case is never folded here. Whether "COM" matches depends on how the registry
entries were loaded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from web_validate.constants import DEFAULT_MAX_LENGTH, MAX_LABEL_LENGTH, MAX_LABELS
from web_validate.domain.encoding import (
    RUNE_SELF,
    decode_last_rune,
    decode_rune,
    rune_count,
)
from web_validate.domain.models import DomainConstraints
from web_validate.errors import (
    DomainError,
    FormatError,
    InvalidEncodingError,
    LengthError,
    UnknownError,
)

if TYPE_CHECKING:
    from web_validate.registry import TLDRegistry

logger = logging.getLogger(__name__)

# A-Z, a-z, 0-9, and hyphen are the only valid characters for domains
DOMAIN_CHARACTERS = frozenset(b"-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

_NO_CONSTRAINTS = DomainConstraints()


def _as_bytes(candidate: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(candidate, str):
        # Lone surrogates survive as invalid UTF-8 and are rejected later
        return candidate.encode("utf-8", errors="surrogatepass")
    if isinstance(candidate, (bytes, bytearray, memoryview)):
        return bytes(candidate)
    raise TypeError(f"domain must be bytes or str, got {type(candidate).__name__}")


def _check_total_length(domain: bytes, constraints: DomainConstraints) -> None:
    # Malformed bytes count as one unit each here; they are caught per label
    count = rune_count(domain)
    # max_length can only tighten the 255 cap
    if constraints.max_length is not None and count > constraints.max_length:
        raise LengthError()
    if count > DEFAULT_MAX_LENGTH:
        raise LengthError()


def _check_subdomain_bounds(label_count: int, constraints: DomainConstraints) -> None:
    # The +1 accounts for the TLD label
    if constraints.min_subdomains is not None and label_count < constraints.min_subdomains + 1:
        raise LengthError()
    if constraints.max_subdomains is not None and label_count > constraints.max_subdomains + 1:
        raise LengthError()


def _check_label(label: bytes) -> None:
    if not label:
        raise FormatError()

    if rune_count(label) > MAX_LABEL_LENGTH:
        raise LengthError()

    first, _ = decode_rune(label, 0)
    if first is None:
        raise InvalidEncodingError()
    if first == "-":
        raise FormatError()

    last, _ = decode_last_rune(label)
    if last is None:
        raise InvalidEncodingError()
    if last == "-":
        raise FormatError()

    index = 0
    length = len(label)
    while index < length:
        byte = label[index]
        if byte < RUNE_SELF:
            if byte not in DOMAIN_CHARACTERS:
                raise FormatError()
            index += 1
            continue

        char, _ = decode_rune(label, index)
        if char is None:
            raise InvalidEncodingError()
        # Only the ASCII ranges pass; non-ASCII letters and digits never do
        raise FormatError()


def _run_pipeline(
    domain: bytes,
    constraints: DomainConstraints,
    registry: TLDRegistry,
) -> None:
    _check_total_length(domain, constraints)

    labels = domain.split(b".")
    if len(labels) > MAX_LABELS:
        raise LengthError()

    _check_subdomain_bounds(len(labels), constraints)

    for label in labels:
        _check_label(label)

    tld = labels[-1].decode("ascii")
    if constraints.reject_numeric_tld and tld.isdigit():
        raise FormatError()

    if not registry.contains(tld):
        raise UnknownError()


def validate_domain(
    candidate: bytes | bytearray | memoryview | str,
    constraints: DomainConstraints | None = None,
    registry: TLDRegistry | None = None,
) -> None:
    """
    Validate a domain name, raising on the first failing check.

    Args:
        candidate: Domain as raw bytes or str (arbitrary bytes are tolerated)
        constraints: Optional limits (max length, subdomain bounds)
        registry: TLD registry to consult (default: bundled registry)

    Raises:
        LengthError: Total, label, label count, or subdomain bound exceeded
        FormatError: Empty label, bad hyphen placement, or invalid character
        InvalidEncodingError: Malformed UTF-8 inside a label
        UnknownError: Well-formed domain whose TLD is not recognized
        TypeError: candidate is not bytes-like or str
    """
    if registry is None:
        from web_validate.registry import get_default_registry

        registry = get_default_registry()

    domain = _as_bytes(candidate)
    try:
        _run_pipeline(domain, constraints or _NO_CONSTRAINTS, registry)
    except DomainError as e:
        logger.debug(f"Rejected domain {domain!r}: {e.kind}")
        raise


def check_domain(
    candidate: bytes | bytearray | memoryview | str,
    constraints: DomainConstraints | None = None,
    registry: TLDRegistry | None = None,
) -> DomainError | None:
    """
    Validate a domain name and return the failure instead of raising.

    Returns:
        The DomainError for the first failing check, or None if valid
    """
    try:
        validate_domain(candidate, constraints, registry)
    except DomainError as e:
        return e
    return None


def is_valid_domain(
    candidate: bytes | bytearray | memoryview | str,
    constraints: DomainConstraints | None = None,
    registry: TLDRegistry | None = None,
) -> bool:
    """Return True if the candidate passes every check."""
    return check_domain(candidate, constraints, registry) is None


def validate_many(
    candidates: Iterable[bytes | str],
    constraints: DomainConstraints | None = None,
    registry: TLDRegistry | None = None,
) -> Iterator[tuple[bytes | str, DomainError | None]]:
    """
    Validate candidates one by one.

    Yields:
        (candidate, error) pairs; error is None for valid candidates
    """
    if registry is None:
        from web_validate.registry import get_default_registry

        registry = get_default_registry()

    for candidate in candidates:
        yield candidate, check_domain(candidate, constraints, registry)
