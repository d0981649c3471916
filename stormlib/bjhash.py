"""Bob Jenkins' 32-bit lookup hash used by the string hash table helpers."""

_MASK = 0xFFFFFFFF
_GOLDEN_RATIO = 0x9E3779B9


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - b - c) & _MASK
    a ^= c >> 13
    b = (b - c - a) & _MASK
    b ^= (a << 8) & _MASK
    c = (c - a - b) & _MASK
    c ^= b >> 13
    a = (a - b - c) & _MASK
    a ^= c >> 12
    b = (b - c - a) & _MASK
    b ^= (a << 16) & _MASK
    c = (c - a - b) & _MASK
    c ^= b >> 5
    a = (a - b - c) & _MASK
    a ^= c >> 3
    b = (b - c - a) & _MASK
    b ^= (a << 10) & _MASK
    c = (c - a - b) & _MASK
    c ^= b >> 15
    return a, b, c


def _word(chunk: bytes) -> int:
    return int.from_bytes(chunk, "little")


def bjhash(data, initval: int = 0) -> int:
    """Hash a bytes-like object into an unsigned 32-bit value."""
    key = bytes(data)
    length = len(key)
    a = b = _GOLDEN_RATIO
    c = initval & _MASK

    offset = 0
    while length - offset >= 12:
        a = (a + _word(key[offset:offset + 4])) & _MASK
        b = (b + _word(key[offset + 4:offset + 8])) & _MASK
        c = (c + _word(key[offset + 8:offset + 12])) & _MASK
        a, b, c = _mix(a, b, c)
        offset += 12

    # The lowest byte of c is reserved for the total length.
    c = (c + length) & _MASK
    tail = key[offset:].ljust(12, b"\0")
    a = (a + _word(tail[0:4])) & _MASK
    b = (b + _word(tail[4:8])) & _MASK
    c = (c + (_word(tail[8:11]) << 8)) & _MASK
    _, _, c = _mix(a, b, c)
    return c