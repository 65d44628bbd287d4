"""Example of a bounded LRU cache built on LinkedOrderedDict."""

from typing import Generic, TypeVar

from linkedodict import LinkedOrderedDict

K = TypeVar("K")
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Least-recently-used cache: hits move to the back, evictions come from the front."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._entries = LinkedOrderedDict[K, V]()

    def get(self, key: K) -> V | None:
        if not self._entries.to_end(key):
            return None
        return self._entries.get(key)

    def put(self, key: K, value: V) -> None:
        if self._entries.has(key):
            self._entries.to_end(key)
        self._entries.set(key, value)
        if len(self._entries) > self._capacity:
            evicted = self._entries.shift()
            print(f"  evicted {evicted}")

    def __str__(self) -> str:
        return str(self._entries)


def main() -> None:
    """Run the LRU cache example."""
    cache = LRUCache[str, int](capacity=3)

    print("=== LRU Cache Example ===\n")
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        cache.put(key, value)
    print(f"Filled:      {cache}")

    print(f"get('a') -> {cache.get('a')}")
    print(f"After hit:   {cache}")

    cache.put("d", 4)
    print(f"After put d: {cache}")
    print(f"get('b') -> {cache.get('b')}")


if __name__ == "__main__":
    main()
