"""A string-keyed hash table using separate chaining."""

from __future__ import annotations

from typing import Any

DEFAULT_SIZE = 10
_MASK64 = (1 << 64) - 1


def djb2(key: str, table_size: int) -> int:
    """Return the djb2 hash of ``key`` reduced modulo ``table_size``.

    Bytes are treated as signed characters and the running value
    wraps at 64 bits.
    """
    value = 5381
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = ((value << 5) + value + char) & _MASK64
    return value % table_size


class ChainedHashTable:
    """Maps string keys to values; colliding keys share a bucket chain."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]
        self._count = 0

    def _chain(self, key: str) -> list[list[Any]]:
        return self._buckets[djb2(key, self.size)]

    def __setitem__(self, key: str, value: Any) -> None:
        chain = self._chain(key)
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.insert(0, [key, value])
        self._count += 1

    def __getitem__(self, key: str) -> Any:
        for entry_key, entry_value in self._chain(key):
            if entry_key == key:
                return entry_value
        raise KeyError(key)

    def __delitem__(self, key: str) -> None:
        chain = self._chain(key)
        for position, entry in enumerate(chain):
            if entry[0] == key:
                del chain[position]
                self._count -= 1
                return
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(entry[0] == key for entry in self._chain(key))

    def __len__(self) -> int:
        return self._count

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when absent."""
        try:
            return self[key]
        except KeyError:
            return default

    def load_factor(self) -> float:
        """Return the number of entries divided by the number of buckets."""
        return self._count / self.size

    def collisions(self) -> int:
        """Return how many entries share a bucket with an earlier one."""
        return sum(len(chain) - 1 for chain in self._buckets if chain)

    def buckets(self) -> list[list[tuple[str, Any]]]:
        """Return every bucket's chain as ``(key, value)`` pairs, head first."""
        return [[(k, v) for k, v in chain] for chain in self._buckets]

    def render(self) -> str:
        """Return a textual dump of the table, one line per bucket."""
        lines = [
            f"Hash Table (size={self.size}, count={self._count}, "
            f"load={self.load_factor():.2f}):"
        ]
        for index, chain in enumerate(self._buckets):
            if chain:
                body = "".join(f"({k}: {v}) -> " for k, v in chain) + "NULL"
            else:
                body = "empty"
            lines.append(f"[{index}]: {body}")
        return "\n".join(lines)