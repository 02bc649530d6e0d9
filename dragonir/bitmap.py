"""Fixed-capacity bit map backed by a byte array."""

from __future__ import annotations


class BitMap:
    """A bit map holding at least ``capacity`` bits, initially all clear."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._bits = bytearray(capacity // 8 + 1)

    def _locate(self, index: int) -> tuple[int, int]:
        if index < 0:
            raise IndexError(f"bit index {index} is negative")
        byte, bit = divmod(index, 8)
        if byte >= len(self._bits):
            raise IndexError(f"bit index {index} out of range")
        return byte, bit

    def set(self, index: int) -> None:
        """Set the given bit to 1."""
        byte, bit = self._locate(index)
        self._bits[byte] |= 1 << bit

    def reset(self, index: int) -> None:
        """Clear the given bit."""
        byte, bit = self._locate(index)
        self._bits[byte] &= ~(1 << bit) & 0xFF

    def test(self, index: int) -> bool:
        """Return whether the given bit is set."""
        byte, bit = self._locate(index)
        return bool(self._bits[byte] & (1 << bit))