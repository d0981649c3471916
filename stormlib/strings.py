"""C-style string helpers: searching, comparing, hashing, tokenizing, parsing."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from itertools import zip_longest

from .bjhash import bjhash

MAX_PATH = 260
MAX_STR = 0x7FFFFFFF

_MASK = 0xFFFFFFFF
_HASH_LIMIT = 0x3FB
_UTF8_OFFSETS = (0, 0, 0x3080, 0x0E2080, 0x3C82080, 0xFA082080, 0x82082080, 0)
_DIGITS = "0123456789"
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass(frozen=True)
class Token:
    """One token read by :func:`str_tokenize` and the text left after it."""

    text: str
    rest: str
    quoted: bool


def _require(value, name: str):
    if value is None:
        raise ValueError(f"{name} is required")
    return value


def _cstr(value):
    """Cut a string or bytes at its first NUL, as a C string would end."""
    end = value.find(b"\0" if isinstance(value, (bytes, bytearray)) else "\0")
    return value if end < 0 else value[:end]


def str_chr(string: str, search: str) -> int | None:
    """Index of the first ``search`` in ``string``, or None."""
    s = _cstr(_require(string, "string"))
    if not search or search == "\0":
        return None
    index = s.find(search)
    return None if index < 0 else index


def str_chr_r(string: str, search: str) -> int | None:
    """Index of the last ``search`` in ``string``, or None."""
    s = _cstr(_require(string, "string"))
    if not search or search == "\0":
        return None
    index = s.rfind(search)
    return None if index < 0 else index


def str_cmp(string1: str, string2: str, maxchars: int = MAX_STR) -> int:
    """Compare at most ``maxchars`` characters; negative, zero or positive."""
    a = _cstr(_require(string1, "string1"))[:maxchars]
    b = _cstr(_require(string2, "string2"))[:maxchars]
    for x, y in zip_longest(a, b, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def str_cmp_i(string1: str, string2: str, maxchars: int = MAX_STR) -> int:
    """Compare like :func:`str_cmp`, ignoring ASCII letter case."""
    a = _cstr(_require(string1, "string1")).translate(_LOWER)
    b = _cstr(_require(string2, "string2")).translate(_LOWER)
    return str_cmp(a, b, maxchars)


def str_copy(source: str, destsize: int = MAX_STR) -> str:
    """Return ``source`` as it fits in a buffer of ``destsize`` characters."""
    s = _cstr(_require(source, "source"))
    if destsize == MAX_STR:
        return s
    return s[:max(0, destsize - 1)]


def str_lower(string: str) -> str:
    """Lower-case the ASCII letters of ``string``."""
    return _cstr(_require(string, "string")).translate(_LOWER)


def str_upper(string: str) -> str:
    """Upper-case the ASCII letters of ``string``."""
    return _cstr(_require(string, "string")).translate(_UPPER)


def str_pack(dest: str, source: str, destsize: int = MAX_STR) -> str:
    """Append ``source`` to ``dest`` within a buffer of ``destsize`` characters."""
    d = _cstr(_require(dest, "dest"))
    s = _cstr(_require(source, "source"))
    if not destsize:
        return d
    if destsize == MAX_STR:
        return d + s
    return d + s[:max(0, destsize - 1 - len(d))]


def str_printf(maxchars: int, format: str, *args) -> str:
    """Format with printf-style ``format``, keeping at most ``maxchars - 1`` characters."""
    _require(format, "format")
    if not maxchars:
        return ""
    text = format % args
    if maxchars != MAX_STR and len(text) >= maxchars:
        text = text[:maxchars - 1]
    return text


def str_str(string: str, search: str) -> int | None:
    """Index of the first occurrence of ``search`` in ``string``, or None."""
    s = _cstr(_require(string, "string"))
    needle = _cstr(_require(search, "search"))
    if not s:
        return None
    index = s.find(needle)
    return None if index < 0 else index


def str_tokenize(string: str, whitespace: str, bufferchars: int = MAX_STR) -> Token:
    """Read the next token from ``string``.

    Characters in ``whitespace`` separate tokens. When ``whitespace`` holds a
    double quote, quoted runs are read as one token without the quotes.
    At most ``bufferchars`` characters are kept in the token text.
    """
    s = _cstr(_require(string, "string"))
    delims = _cstr(_require(whitespace, "whitespace"))
    if bufferchars < 0:
        raise ValueError("bufferchars must not be negative")

    quotes = '"' in delims
    inquotes = False
    usedquotes = False
    pos = 0
    n = len(s)

    while pos < n and s[pos] in delims:
        if quotes and s[pos] == '"':
            inquotes = usedquotes = True
            pos += 1
            break
        pos += 1

    token: list[str] = []
    while pos < n:
        ch = s[pos]
        if quotes and ch == '"':
            if token and not inquotes:
                break
            pos += 1
            usedquotes = True
            inquotes = not inquotes
            if not inquotes:
                break
            continue
        if not inquotes and ch in delims:
            pos += 1
            break
        if len(token) < bufferchars:
            token.append(ch)
        pos += 1

    return Token("".join(token), s[pos:], usedquotes)


def _utf8_length(byte: int) -> int:
    if byte == 0:
        return 0
    if byte < 0xC0:
        return 1
    if byte < 0xE0:
        return 2
    if byte < 0xF0:
        return 3
    if byte < 0xF8:
        return 4
    if byte < 0xFC:
        return 5
    return 6


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 0x80 else byte


def _upper_code(kind: int, value: int) -> int:
    if kind == 1:
        return value - 32 if 0x61 <= value <= 0x7A else value
    if kind != 2:
        return value
    if 0xE0 <= value <= 0xFE:
        return value - 32
    if value == 339:
        return 338
    if value == 1105:
        return 1025
    if 0x430 <= value <= 0x44F:
        return value - 32
    return value


def _next_text_upper(data: bytes, pos: int) -> tuple[int, int]:
    """Read one character at ``pos`` and return its upper-case code and the new position."""
    kind = _utf8_length(data[pos])
    orig = 0
    if kind >= 2:
        orig = (orig + _signed(data[pos])) & _MASK
        pos += 1
        if pos >= len(data):
            return 0, pos
        orig = (orig << 6) & _MASK
    orig = (orig + _signed(data[pos])) & _MASK
    pos += 1
    orig = (orig - _UTF8_OFFSETS[kind]) & _MASK
    orig = min(orig, 0xFFFF)
    return _upper_code(kind, orig), pos


def str_hash_ht(string) -> int:
    """Case- and slash-insensitive hash of a name, as used by hash tables."""
    _require(string, "string")
    data = _cstr(string.encode("utf-8") if isinstance(string, str) else bytes(string))
    normalized = bytearray()
    pos = 0
    while pos < len(data) and len(normalized) <= _HASH_LIMIT:
        upper, pos = _next_text_upper(data, pos)
        value = 0x5C if upper == 0x2F else upper
        while value:
            normalized.append(value & 0xFF)
            value >>= 8
    return bjhash(bytes(normalized), 0)


def _digit(s: str, pos: int) -> int | None:
    if pos < len(s) and s[pos] in _DIGITS:
        return ord(s[pos]) - ord("0")
    return None


def _pow10(exponent: int) -> float:
    try:
        return 10.0 ** exponent
    except OverflowError:
        return math.inf


def _build_real_digits() -> tuple[tuple[float, ...], ...]:
    rows = []
    for exponent in range(1, 21):
        base, remaining, power = 10.0, exponent, 1.0
        while True:
            if remaining & 1:
                power *= base
            remaining >>= 1
            if not remaining:
                break
            base *= base
        scale = 1.0 / power
        rows.append(tuple(scale * digit for digit in range(10)))
    return tuple(rows)


_REAL_DIGITS = _build_real_digits()


def _to_float32(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def str_to_int(string: str) -> int:
    """Parse a leading optionally negative decimal integer as a signed 32-bit value."""
    s = _cstr(_require(string, "string"))
    pos = 0
    negative = s.startswith("-")
    if negative:
        pos = 1
    result = 0
    while (digit := _digit(s, pos)) is not None:
        result = (digit + 10 * result) & _MASK
        pos += 1
    if negative:
        result = (-result) & _MASK
    return result - (1 << 32) if result & 0x80000000 else result


def str_to_float(string: str) -> float:
    """Parse a leading decimal number with optional fraction and exponent as a 32-bit float."""
    s = _cstr(_require(string, "string"))
    pos = 0
    negative = s.startswith("-")
    if negative:
        pos = 1

    digit = _digit(s, pos)
    if digit is None:
        result = 0.0
    else:
        low = digit
        high = 0.0
        chunk_start = pos
        pos += 1
        while (digit := _digit(s, pos)) is not None:
            low = digit + 10 * low
            pos += 1
            if low >= 0x19999999:
                high = high * _pow10(pos - chunk_start) + float(low)
                low = 0
                chunk_start = pos
        if high == 0.0:
            result = float(low)
        else:
            result = _pow10(pos - chunk_start) * high + float(low)

    if pos < len(s) and s[pos] == ".":
        pos += 1
        count = 0
        while (digit := _digit(s, pos)) is not None:
            pos += 1
            if count < 20:
                result += _REAL_DIGITS[count][digit]
            else:
                result += _pow10(-(count + 1)) * digit
            count += 1

    if pos < len(s) and s[pos] in "eE":
        rest = s[pos + 1:]
        if rest.startswith("+"):
            rest = rest[1:]
        result *= _pow10(str_to_int(rest))

    if negative:
        result = -result
    return _to_float32(result)