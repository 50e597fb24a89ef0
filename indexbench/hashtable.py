"""A fixed-size hash table that resolves collisions by chaining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, List, Tuple

TABLE_SIZE = 26


def int_hash(key: int, size: int = TABLE_SIZE) -> int:
    """Bucket of an integer key: the key modulo the table size."""
    return key % size


def first_char_hash(key: str, size: int = TABLE_SIZE) -> int:
    """Bucket of a string key, taken from its first character only."""
    return (ord(key[0]) if key else 0) % size


@dataclass(frozen=True)
class Probe:
    """Outcome of walking a chain: success and how many chain entries were visited."""

    found: bool
    iterations: int

    def __bool__(self) -> bool:
        return self.found


class ChainedHashTable:
    """A hash table of unique keys; new keys go to the front of their chain."""

    def __init__(
        self,
        hash_function: Callable[[Any, int], int],
        size: int = TABLE_SIZE,
    ) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._hash = hash_function
        self._buckets: List[List[Hashable]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: Any) -> List[Hashable]:
        return self._buckets[self._hash(key, self.size)]

    def insert(self, key: Any) -> bool:
        """Add a key at the front of its chain; return False if already present."""
        bucket = self._bucket(key)
        if key in bucket:
            return False
        bucket.insert(0, key)
        self._count += 1
        return True

    def search(self, key: Any) -> Probe:
        """Walk the key's chain until the key turns up or the chain ends."""
        bucket = self._bucket(key)
        for visited, candidate in enumerate(bucket, start=1):
            if candidate == key:
                return Probe(True, visited)
        return Probe(False, len(bucket))

    def remove(self, key: Any) -> Probe:
        """Unlink a key from its chain, reporting the entries visited."""
        bucket = self._bucket(key)
        for visited, candidate in enumerate(bucket, start=1):
            if candidate == key:
                del bucket[visited - 1]
                self._count -= 1
                return Probe(True, visited)
        return Probe(False, len(bucket))

    def update(self, old_key: Any, new_key: Any) -> Probe:
        """Replace ``old_key`` by ``new_key``.

        Fails with zero iterations when ``new_key`` already exists, and with the
        removal's iterations when ``old_key`` is missing. On success the count is
        the removal's iterations plus those of the check for ``new_key``.
        """
        existing = self.search(new_key)
        if existing.found:
            return Probe(False, 0)
        removed = self.remove(old_key)
        if not removed.found:
            return removed
        self.insert(new_key)
        return Probe(True, removed.iterations + existing.iterations)

    def buckets(self) -> List[Tuple[Any, ...]]:
        """Every chain, front first, in bucket order."""
        return [tuple(bucket) for bucket in self._buckets]

    def display(self) -> str:
        """Render each bucket as ``i: k -> k -> NULL`` on its own line."""
        return "".join(
            f"{index}: " + "".join(f"{key} -> " for key in bucket) + "NULL\n"
            for index, bucket in enumerate(self._buckets)
        )

    def __contains__(self, key: Any) -> bool:
        return self.search(key).found

    def __len__(self) -> int:
        return self._count