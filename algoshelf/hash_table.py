"""A string-keyed hash table with separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

TABLE_SIZE = 100
_MISSING = object()


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def string_hash(key: str, m: int) -> int:
    """Return the bucket in ``range(m)`` for ``key``.

    The key's UTF-8 bytes are read as signed characters and combined with a
    multiplier of 31 in 32-bit arithmetic.  Reading stops at the first byte
    whose value does not exceed its own position.
    """
    if m < 1:
        raise ValueError(f"table size must be at least 1, got {m}")
    result = 0
    for position, byte in enumerate(key.encode("utf-8")):
        char = byte - 256 if byte > 127 else byte
        if not position < char:
            break
        result = _to_int32(result * 31 + char)
    return abs(result) % m


@dataclass(slots=True)
class _Entry:
    key: str
    value: str


class HashTable:
    """Mapping from strings to strings with a fixed number of buckets."""

    def __init__(self, size: int = TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError(f"table size must be at least 1, got {size}")
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[string_hash(key, len(self._buckets))]

    def _find(self, key: str) -> _Entry | None:
        return next((e for e in self._bucket(key) if e.key == key), None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __getitem__(self, key: str) -> str:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: str) -> None:
        entry = self._find(key)
        if entry is not None:
            entry.value = value
        else:
            self._bucket(key).insert(0, _Entry(key, value))

    def __delitem__(self, key: str) -> None:
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                return
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        """Yield keys bucket by bucket, newest first within a bucket."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"HashTable({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for ``key``, or ``default`` if it is absent."""
        entry = self._find(key)
        return default if entry is None else entry.value

    def describe(self) -> str:
        """Return one line per bucket showing its first entry."""
        lines = [
            f"{bucket[0].key}: {bucket[0].value}" if bucket else f"{index}:"
            for index, bucket in enumerate(self._buckets)
        ]
        lines.append("===================")
        return "\n".join(lines) + "\n"