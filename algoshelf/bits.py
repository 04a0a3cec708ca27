"""Small bit-manipulation helpers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

INT_WIDTH = 32


def to_bits(value: int, width: int = INT_WIDTH) -> str:
    """Return the two's-complement bit string of ``value`` in ``width`` bits."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    return format(value & ((1 << width) - 1), f"0{width}b")


def format_bits(value: int, width: int = INT_WIDTH) -> str:
    """Return ``value`` right-aligned in nine columns followed by its bits."""
    return f"{value:9d}: {to_bits(value, width)}"


def set_bit(value: int, position: int) -> int:
    """Return ``value`` with the bit at ``position`` turned on."""
    return value | (1 << position)


def clear_bit(value: int, position: int) -> int:
    """Return ``value`` with the bit at ``position`` turned off."""
    return value & ~(1 << position)


def is_little_endian() -> bool:
    """Return True if the host stores the least significant byte first."""
    return sys.byteorder == "little"


def main(argv: Sequence[str] | None = None) -> int:
    """Show setting and clearing a bit, then report the host byte order."""
    x = 0
    print(format_bits(x))
    x = set_bit(x, 2)
    print(format_bits(x))
    x = 65535
    print(format_bits(x))
    x = clear_bit(x, 2)
    print(format_bits(x))

    if is_little_endian():
        print("This system is little endian.")
    else:
        print("This system is big endian.")
    return 0


if __name__ == "__main__":
    sys.exit(main())