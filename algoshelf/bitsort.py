"""Sorting distinct non-negative integers with a bit vector."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

LIMIT = 10_000_000


class BitVector:
    """A fixed-size set of integers in ``range(size)`` stored one bit each."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._size = size
        self._bits = bytearray((size + 7) // 8)

    def _locate(self, i: int) -> tuple[int, int]:
        if not 0 <= i < self._size:
            raise IndexError(f"bit {i} out of range 0..{self._size - 1}")
        return i >> 3, 1 << (i & 7)

    def set(self, i: int) -> None:
        byte, mask = self._locate(i)
        self._bits[byte] |= mask

    def clear(self, i: int) -> None:
        byte, mask = self._locate(i)
        self._bits[byte] &= ~mask & 0xFF

    def __contains__(self, i: object) -> bool:
        if not isinstance(i, int) or not 0 <= i < self._size:
            return False
        byte, mask = self._locate(i)
        return bool(self._bits[byte] & mask)

    def __iter__(self) -> Iterator[int]:
        """Yield the set positions in ascending order."""
        for byte_index, byte in enumerate(self._bits):
            if byte:
                base = byte_index << 3
                for bit in range(8):
                    if byte >> bit & 1:
                        yield base + bit


def bitsort(numbers: Iterable[int], limit: int = LIMIT) -> list[int]:
    """Return the distinct values of ``numbers`` in ascending order."""
    vector = BitVector(limit)
    for number in numbers:
        vector.set(number)
    return list(vector)


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input and print them sorted, one per line."""
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
        result = bitsort(numbers)
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{n}\n" for n in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())