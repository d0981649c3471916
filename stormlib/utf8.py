"""Decoding and encoding of single UTF-8 characters."""

INVALID = 0x80000000
"""Value returned for a malformed sequence."""

END = 0xFFFFFFFF
"""Value returned when the input ends before a character is complete."""


def _byte_at(data: bytes, index: int) -> int:
    return data[index] if index < len(data) else 0


def get_utf8(data) -> tuple[int, int]:
    """Decode the first character of ``data``.

    Returns ``(code, consumed)``. A zero byte or the end of the input counts
    as a terminator; ``code`` is :data:`END` when the terminator is reached
    first and :data:`INVALID` for a malformed sequence.
    """
    buf = bytes(data)
    lead = _byte_at(buf, 0)
    if not lead:
        return END, 0

    consumed = 1
    if lead & 0xFE == 0xFC:
        value, extra = lead & 0x01, 5
    elif lead & 0xFC == 0xF8:
        value, extra = lead & 0x03, 4
    elif lead & 0xF8 == 0xF0:
        value, extra = lead & 0x07, 3
    elif lead & 0xF0 == 0xE0:
        value, extra = lead & 0x0F, 2
    elif lead & 0xE0 == 0xC0:
        value, extra = lead & 0x1F, 1
    elif lead & 0x80 == 0:
        return lead, consumed
    else:
        return INVALID, consumed

    for index in range(1, extra + 1):
        byte = _byte_at(buf, index)
        if not byte:
            return END, consumed
        consumed += 1
        if byte & 0xC0 != 0x80:
            return INVALID, consumed
        value = (value << 6) | (byte & 0x3F)

    return value, consumed


def put_utf8(code: int) -> bytes:
    """Encode ``code`` as UTF-8 bytes.

    Code points at or above 0x80000000 produce an empty result, as does
    code point zero (the terminator itself).
    """
    if code < 0:
        raise ValueError("code point must not be negative")
    c = code & 0xFFFFFFFF

    if c < 0x80:
        out = [c]
    elif c < 0x800:
        out = [(c >> 6) | 0xC0]
    elif c < 0x10000:
        out = [(c >> 12) | 0xE0, ((c >> 6) & 0x3F) | 0x80]
    elif c < 0x200000:
        out = [(c >> 18) | 0xF0, ((c >> 12) & 0x3F) | 0x80, ((c >> 6) & 0x3F) | 0x80]
    elif c < 0x80000000:
        if c < 0x400000:
            out = [(c >> 8) | 0xF8]
        else:
            out = [(c >> 30) | 0xFC, ((c >> 8) & 0x3F) | 0x80]
        out += [
            ((c >> 18) & 0x3F) | 0x80,
            ((c >> 12) & 0x3F) | 0x80,
            ((c >> 6) & 0x3F) | 0x80,
        ]
    else:
        return b""

    if c >= 0x80:
        out.append((c & 0x3F) | 0x80)

    encoded = bytes(byte & 0xFF for byte in out)
    terminator = encoded.find(b"\0")
    return encoded if terminator < 0 else encoded[:terminator]