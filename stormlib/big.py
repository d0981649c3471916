"""Arbitrary-precision unsigned integers built on word buffers."""

from __future__ import annotations

from . import ops
from .bigbuffer import BigBuffer, BigStack


class BigData:
    """An unsigned big integer with its own scratch stack.

    Operations store their result in the instance they are called on.
    """

    def __init__(self) -> None:
        self.primary = BigBuffer()
        self.stack = BigStack()
        self.output = b""

    def __repr__(self) -> str:
        return f"BigData({self.primary.words()!r})"

    def add(self, b: BigData, c: BigData) -> None:
        """self = b + c."""
        ops.add(self.primary, b.primary, c.primary)

    def bit_len(self) -> int:
        """Number of significant bits; at least 1 for a non-zero value."""
        buffer = self.primary
        buffer.trim()
        count = len(buffer)
        if not count:
            return 0
        high = buffer[count - 1]
        return (count - 1) * 32 + max(high.bit_length(), 1)

    def compare(self, other: BigData) -> int:
        """-1, 0 or 1 as self is less than, equal to or greater than other."""
        return ops.compare(self.primary, other.primary)

    def from_binary(self, data) -> None:
        """Load the value from little-endian bytes."""
        ops.from_binary(self.primary, data)

    def from_unsigned(self, value: int) -> None:
        """Load the value from a 32-bit unsigned integer."""
        ops.from_unsigned(self.primary, value)

    def mod(self, b: BigData, c: BigData) -> None:
        """self = b % c."""
        scratch = self.stack.alloc()
        try:
            ops.div(scratch, self.primary, b.primary, c.primary, self.stack)
        finally:
            self.stack.free(1)

    def mul(self, b: BigData, c: BigData) -> None:
        """self = b * c."""
        ops.mul(self.primary, b.primary, c.primary, self.stack)

    def pow_mod(self, b: BigData, c: BigData, d: BigData) -> None:
        """self = (b ** c) % d."""
        ops.pow_mod(self.primary, b.primary, c.primary, d.primary, self.stack)

    def shl(self, b: BigData, shift: int) -> None:
        """self = b << shift."""
        ops.shl(self.primary, b.primary, shift)

    def shr(self, b: BigData, shift: int) -> None:
        """self = b >> shift."""
        ops.shr(self.primary, b.primary, shift)

    def square(self, b: BigData) -> None:
        """self = b * b."""
        ops.square(self.primary, b.primary, self.stack)

    def sub(self, b: BigData, c: BigData) -> None:
        """self = b - c; raises ValueError when c is greater than b."""
        ops.sub(self.primary, b.primary, c.primary)

    def to_binary(self, max_bytes: int) -> bytes:
        """Little-endian bytes of the value, at most ``max_bytes`` of them."""
        self.output = ops.to_binary(self.primary)
        return self.output[:max(0, max_bytes)]