"""A fixed-size array of bits packed into bytes, with selectable bit and byte order."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterator, Optional

_REVERSE_BITS_MASK = 0x01
_REVERSE_BYTES_MASK = 0x02


class Reverse(IntFlag):
    """Ordering options for addressing the bits of a :class:`BitBool`."""

    NONE = 0
    BITS = _REVERSE_BITS_MASK
    BYTES = _REVERSE_BYTES_MASK
    BOTH = _REVERSE_BITS_MASK | _REVERSE_BYTES_MASK
    DEFAULT = 0


class BitBool:
    """``count`` booleans stored in ``data``, a bytearray free to read and modify.

    With no reversal, bit 0 is the least significant bit of the first byte.
    ``Reverse.BITS`` makes index 0 address the most significant bit of a byte;
    ``Reverse.BYTES`` makes index 0 address the last byte.
    """

    def __init__(self, count: int, reverse: Reverse = Reverse.DEFAULT) -> None:
        if count < 0:
            raise ValueError("bit count must not be negative")
        self._count = count
        self.reverse = Reverse(reverse)
        self.data = bytearray((count + 7) // 8)

    @property
    def byte_count(self) -> int:
        """Number of bytes holding the bits."""
        return len(self.data)

    def __len__(self) -> int:
        return self._count

    def _locate(self, index: int) -> tuple[int, int]:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError(f"bit index out of range: {index}")
        if self.reverse & Reverse.BYTES:
            offset = (self.byte_count - 1) - (index >> 3)
        else:
            offset = index >> 3
        bit = index & 0x7
        mask = (0x80 >> bit) if self.reverse & Reverse.BITS else (0x1 << bit)
        return offset, mask

    def __getitem__(self, index: int) -> bool:
        offset, mask = self._locate(index)
        return bool(self.data[offset] & mask)

    def __setitem__(self, index: int, value: bool) -> None:
        offset, mask = self._locate(index)
        if value:
            self.data[offset] |= mask
        else:
            self.data[offset] &= ~mask & 0xFF

    def __iter__(self) -> Iterator[bool]:
        return self.iterate()

    def get(self, index: int) -> bool:
        """Return the bit at ``index``."""
        return self[index]

    def set(self, index: int, value: bool) -> None:
        """Set the bit at ``index`` to ``value``."""
        self[index] = value

    def invert(self, index: int) -> None:
        """Flip the bit at ``index``."""
        offset, mask = self._locate(index)
        self.data[offset] ^= mask

    def invert_all(self) -> None:
        """Flip every bit of every byte, padding bits included."""
        for offset, byte in enumerate(self.data):
            self.data[offset] = ~byte & 0xFF

    def iterate(self, start: int = 0, length: Optional[int] = None) -> Iterator[bool]:
        """Yield the bits from ``start``, ``length`` of them or up to the end."""
        finish = self._count if length is None else start + length
        for index in range(start, finish):
            yield self[index]

    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in self)
        return f"BitBool({self._count}, {self.reverse!r}, bits={bits!r})"