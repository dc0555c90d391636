"""Byte cursor used by the header decoder."""
from __future__ import annotations

from .errors import UnexpectedEndOfFile


class ByteCursor:
    """Read big-endian fields from a byte buffer with bound checks.

    The position only moves forward, one byte per :meth:`read_byte` call.
    Every wider reader is composed from :meth:`read_byte`, so a truncated
    buffer fails on the exact byte that is missing and no partial field is
    ever returned.
    """

    __slots__ = ("_data", "_length", "_position")

    def __init__(self, data: bytes):
        self._data = memoryview(bytes(data))
        self._length = len(self._data)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return self._length - self._position

    def read_byte(self) -> int:
        if self._position == self._length:
            raise UnexpectedEndOfFile(self._position)
        byte = self._data[self._position]
        self._position += 1
        return byte

    def read_fixed_string(self, size: int) -> str:
        """Read ``size`` bytes as single-byte characters."""

        if size < 0:
            raise ValueError("Size must be non-negative.")
        return "".join(chr(self.read_byte()) for _ in range(size))

    def read_word(self) -> int:
        high = self.read_byte()
        low = self.read_byte()
        return (high << 8) | low

    def read_dword(self) -> int:
        value = 0
        for _ in range(4):
            value = (value << 8) | self.read_byte()
        return value


__all__ = ["ByteCursor"]
