"""A hash map with a fixed number of buckets and separate chaining."""

from __future__ import annotations

from collections.abc import Sequence

BUCKETS = 10007
MISSING = -1


class HashMap:
    """Map integer keys to values using chained buckets.

    A lookup of an absent key returns ``-1``; removing an absent key does
    nothing.
    """

    def __init__(self) -> None:
        self._table: list[list[list[int]]] = [[] for _ in range(BUCKETS)]

    @staticmethod
    def _index(key: int) -> int:
        return key % BUCKETS

    def _bucket(self, key: int) -> list[list[int]]:
        return self._table[self._index(key)]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.insert(0, [key, value])

    def get(self, key: int) -> int:
        """Return the value stored under ``key``, or ``-1`` if there is none."""
        return next(
            (value for stored, value in self._bucket(key) if stored == key),
            MISSING,
        )

    def remove(self, key: int) -> None:
        """Delete ``key`` if it is present."""
        bucket = self._bucket(key)
        for position, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[position]
                return

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(stored == key for stored, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a short demonstration and print each lookup result."""
    table = HashMap()
    print("Testing HashMap implementation:")

    table.put(1, 1)
    table.put(2, 2)
    print(f"get(1): {table.get(1)}")
    print(f"get(2): {table.get(2)}")
    print(f"get(3): {table.get(3)}")

    table.put(2, 1)
    print(f"get(2) after update: {table.get(2)}")

    table.remove(2)
    print(f"get(2) after remove: {table.get(2)}")

    table.put(0, 0)
    print(f"get(0): {table.get(0)}")

    table.put(1000000, 1000000)
    print(f"get(1000000): {table.get(1000000)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())