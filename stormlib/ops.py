"""Arithmetic on little-endian 32-bit word buffers."""

from __future__ import annotations

from contextlib import contextmanager

from .bigbuffer import BigBuffer, BigStack

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


@contextmanager
def _scratch(stack: BigStack, count: int):
    buffers: list[BigBuffer] = []
    try:
        for _ in range(count):
            buffers.append(stack.alloc())
        yield buffers
    finally:
        stack.free(len(buffers))


def extract_low_part(value: int) -> tuple[int, int]:
    """Split a 64-bit value into its low word and the value shifted down 32 bits."""
    value &= _MASK64
    return value & _MASK32, value >> 32


def extract_low_part_large_sum(value: int, add: int) -> tuple[int, int]:
    """Add ``add`` to ``value`` keeping the 65th bit, then extract the low word."""
    total = (value & _MASK64) + (add & _MASK64)
    carry = total >> 64
    low, rest = extract_low_part(total)
    return low, (rest + (carry << 32)) & _MASK64


def extract_low_part_sx(value: int) -> tuple[int, int]:
    """Extract the low word, sign-extending the remaining high word."""
    low, rest = extract_low_part(value)
    if rest >= 0x80000000:
        rest = (rest & _MASK32) | 0xFFFFFFFF00000000
    return low, rest


def insert_low_part(value: int, low: int) -> int:
    """Shift ``value`` up 32 bits and put ``low`` beneath it, within 64 bits."""
    return ((value << 32) | (low & _MASK32)) & _MASK64


def make_large(low: int, high: int) -> int:
    """Join two 32-bit words into a 64-bit value."""
    return (low & _MASK32) + ((high & _MASK32) << 32)


def add_small(a: BigBuffer, b: BigBuffer, c: int) -> None:
    """a = b + c, with c a single word."""
    carry = c & _MASK32
    i = 0
    while carry or b.is_used(i):
        carry += b[i]
        a[i], carry = extract_low_part(carry)
        i += 1
    a.set_count(i)


def add(a: BigBuffer, b: BigBuffer, c: BigBuffer) -> None:
    """a = b + c."""
    carry = 0
    i = 0
    while carry or b.is_used(i) or c.is_used(i):
        carry += b[i] + c[i]
        a[i], carry = extract_low_part(carry)
        i += 1
    a.set_count(i)


def compare(a: BigBuffer, b: BigBuffer) -> int:
    """-1, 0 or 1 as a is less than, equal to or greater than b."""
    result = 0
    i = 0
    while a.is_used(i) or b.is_used(i):
        if a[i] != b[i]:
            result = 1 if b[i] < a[i] else -1
        i += 1
    return result


def div_small(a: BigBuffer, c: BigBuffer, d: int) -> int:
    """a = c // d for a small divisor; returns the remainder word."""
    d &= _MASK64
    index = len(c)
    a.set_count(index)
    data = 0
    while index > 0:
        index -= 1
        data = insert_low_part(data, c[index])
        a[index] = data // d
        data %= d
    a.trim()
    return data & _MASK32


def div(a: BigBuffer, b: BigBuffer, c: BigBuffer, d: BigBuffer, stack: BigStack) -> None:
    """a = c // d and b = c % d."""
    c.trim()
    d.trim()
    c_count = len(c)
    d_count = len(d)

    if d_count > c_count:
        b.copy_from(c)
        set_zero(a)
        return

    if d_count <= 1:
        b[0] = div_small(a, c, d[0])
        b.set_count(1)
        return

    with _scratch(stack, 3) as (cc, dd, work):
        shift = 0x1F - (high_bit_pos(d) & 0x1F)
        shl(cc, c, shift)
        shl(dd, d, shift)

        t = (dd[d_count - 1] + 1) & _MASK32
        step = c_count - d_count + 1
        a.set_count(step)

        while True:
            index = step - 1
            a.set_offset(index)
            cc.set_offset(index)

            if t:
                a[0] = make_large(cc[d_count - 1], cc[d_count]) // t
            else:
                a[0] = cc[d_count]

            if a[0]:
                mul_small(work, dd, a[0])
                sub(cc, cc, work)

            while cc[d_count] or compare(cc, dd) >= 0:
                a[0] = a[0] + 1
                sub(cc, cc, dd)

            if index == 0:
                break
            step = index

        shr(b, cc, shift)
        b.trim()


def from_binary(buffer: BigBuffer, data) -> None:
    """Load little-endian bytes into ``buffer``."""
    buffer.clear()
    for i, byte in enumerate(bytes(data)):
        word = buffer[i // 4] if i & 3 else 0
        buffer[i // 4] = word + (byte << (8 * (i & 3)))


def from_unsigned(buffer: BigBuffer, value: int) -> None:
    """Load a single 32-bit value into ``buffer``."""
    buffer[0] = value
    buffer.set_count(1)


def high_bit_pos(buffer: BigBuffer) -> int:
    """Position of the highest set bit, or 0 when there is none."""
    index = len(buffer)
    if index == 0:
        return 0
    index -= 1
    while buffer[index] == 0:
        if index == 0:
            return 0
        index -= 1
    return index * 32 + buffer[index].bit_length() - 1


def mul_small(a: BigBuffer, b: BigBuffer, c: int) -> None:
    """a = b * c, with c a small value."""
    c &= _MASK64
    carry = 0
    i = 0
    while carry or b.is_used(i):
        carry = (carry + b[i] * c) & _MASK64
        a[i], carry = extract_low_part(carry)
        i += 1
    a.set_count(i)


def mul(a: BigBuffer, b: BigBuffer, c: BigBuffer, stack: BigStack) -> None:
    """a = b * c."""
    aa = stack.make_distinct(a, a is b or a is c)
    aa.clear()

    i = 0
    while b.is_used(i):
        carry = 0
        j = 0
        while c.is_used(j):
            carry += aa[i + j] + b[i] * c[j]
            aa[i + j], carry = extract_low_part(carry)
            j += 1
        aa[i + j], _ = extract_low_part(carry)
        i += 1

    stack.unmake_distinct(a, aa)


def mul_mod(a: BigBuffer, b: BigBuffer, c: BigBuffer, d: BigBuffer, stack: BigStack) -> None:
    """a = (b * c) % d."""
    with _scratch(stack, 1) as (scratch,):
        mul(scratch, b, c, stack)
        div(scratch, a, scratch, d, stack)


def pow_mod(a: BigBuffer, b: BigBuffer, c: BigBuffer, d: BigBuffer, stack: BigStack) -> None:
    """a = (b ** c) % d."""
    c.trim()
    if len(c) == 0:
        set_one(a)
        return

    with _scratch(stack, 3) as (temp, b2, b3):
        aa = stack.make_distinct(a, a is b or a is c or a is d)
        try:
            mul_mod(b2, b, b, d, stack)
            mul_mod(b3, b2, b, d, stack)
            powers = (b, b2, b3)

            set_one(aa)

            top = len(c) - 1
            for i in range(top, -1, -1):
                bits = c[i]
                remaining = 32

                if i == top and not bits & 0xC0000000:
                    while not bits & 0xC0000000:
                        bits = (bits * 4) & _MASK32
                        remaining -= 2

                if remaining:
                    for _ in range(((remaining - 1) >> 1) + 1):
                        square(aa, aa, stack)
                        div(temp, aa, aa, d, stack)
                        square(aa, aa, stack)
                        div(temp, aa, aa, d, stack)

                        if bits >> 30:
                            mul_mod(aa, aa, powers[(bits >> 30) - 1], d, stack)

                        bits = (bits * 4) & _MASK32
        except BaseException:
            if aa is not a:
                stack.free(1)
            raise

        stack.unmake_distinct(a, aa)


def set_one(buffer: BigBuffer) -> None:
    buffer.set_count(1)
    buffer[0] = 1


def set_zero(buffer: BigBuffer) -> None:
    buffer.clear()


def shl(a: BigBuffer, b: BigBuffer, shift: int) -> None:
    """a = b << shift."""
    words = shift >> 5
    bits = shift & 0x1F
    count = len(b) + words + 1

    for i in range(count - 1, -1, -1):
        j = i - words
        value = 0
        if i >= words:
            value = (b[j] << bits) & _MASK32
            if i > words and bits:
                value += b[j - 1] >> (32 - bits)
        a[i] = value

    a.set_count(count)
    a.trim()


def shr(a: BigBuffer, b: BigBuffer, shift: int) -> None:
    """a = b >> shift."""
    words = shift >> 5
    bits = shift & 0x1F

    i = 0
    while b.is_used(i + words):
        value = b[i + words] >> bits
        if bits:
            value += (b[i + words + 1] << (32 - bits)) & _MASK32
        a[i] = value
        i += 1

    a.set_count(i)


def square(a: BigBuffer, b: BigBuffer, stack: BigStack) -> None:
    """a = b * b."""
    aa = stack.make_distinct(a, a is b)
    aa.clear()

    i = 0
    while b.is_used(i):
        carry = 0
        for j in range(i + 1):
            product = b[i] * b[j]
            total = product + aa[i + j]
            if j < i:
                carry = (carry + product) & _MASK64
            aa[i + j], carry = extract_low_part_large_sum(carry, total)
        aa[2 * i + 1], _ = extract_low_part(carry)
        i += 1

    stack.unmake_distinct(a, aa)


def sub(a: BigBuffer, b: BigBuffer, c: BigBuffer) -> None:
    """a = b - c; raises ValueError when c is greater than b."""
    borrow = 0
    i = 0
    while b.is_used(i) or c.is_used(i):
        borrow = (borrow + b[i] - c[i]) & _MASK64
        a[i], borrow = extract_low_part_sx(borrow)
        i += 1

    a.set_count(i)

    if borrow:
        raise ValueError("subtraction result would be negative")


def to_binary(buffer: BigBuffer) -> bytes:
    """Little-endian bytes of ``buffer`` without the high zero bytes of its top word."""
    count = len(buffer)
    out = bytearray()
    for i in range(count * 4):
        shifted = buffer[i // 4] >> (8 * (i & 3))
        if shifted or i // 4 + 1 < count:
            out.append(shifted & 0xFF)
    return bytes(out)