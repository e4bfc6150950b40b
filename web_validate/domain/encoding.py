"""
UTF-8 scalar value decoding over raw bytes.

Candidates may come from untrusted input, so nothing here raises on malformed
data. Decoding failures are reported as ``(None, 1)``: the bad byte is
consumed as a single unit, which is also how it is counted for length limits.
"""

RUNE_SELF = 0x80  # Bytes below this are single-byte ASCII scalars
UTF_MAX = 4


def _sequence_width(lead: int) -> int:
    """Expected byte width of a UTF-8 sequence starting with ``lead`` (0 if invalid)."""
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def decode_rune(data: bytes, start: int = 0) -> tuple[str | None, int]:
    """
    Decode the scalar value starting at ``data[start]``.

    Args:
        data: Raw bytes
        start: Offset of the first byte to decode (must be < len(data))

    Returns:
        (character, size) on success, (None, 1) on a malformed sequence
    """
    lead = data[start]
    if lead < RUNE_SELF:
        return chr(lead), 1

    width = _sequence_width(lead)
    if not width:
        return None, 1

    # The strict codec rejects overlong forms, surrogates and truncation
    try:
        char = bytes(data[start : start + width]).decode("utf-8")
    except UnicodeDecodeError:
        return None, 1
    return char, width


def decode_last_rune(data: bytes) -> tuple[str | None, int]:
    """
    Decode the final scalar value of ``data``.

    Returns:
        (character, size) on success, (None, 1) on a malformed sequence
    """
    end = len(data)
    if data[end - 1] < RUNE_SELF:
        return chr(data[end - 1]), 1

    lower = max(end - UTF_MAX, 0)
    start = end - 1
    while start > lower and _is_continuation(data[start]):
        start -= 1

    char, size = decode_rune(data, start)
    if char is None or start + size != end:
        return None, 1
    return char, size


def iter_runes(data: bytes):
    """Yield ``(character_or_None, size)`` for every unit in ``data``."""
    index = 0
    length = len(data)
    while index < length:
        char, size = decode_rune(data, index)
        yield char, size
        index += size


def rune_count(data: bytes) -> int:
    """
    Count scalar values in ``data``.

    Each byte of a malformed sequence counts as one unit.
    """
    # ASCII fast path
    if data.isascii():
        return len(data)
    return sum(1 for _ in iter_runes(data))
