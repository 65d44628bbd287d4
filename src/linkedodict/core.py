"""Main LinkedOrderedDict implementation."""

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Generic

from linkedodict.errors import MissingKeyError, MutatedDuringIterationError
from linkedodict.linkedlist import CircularLinkedList, Node
from linkedodict.types import Entry, K, V

logger = logging.getLogger(__name__)


class LinkedOrderedDict(Generic[K, V]):
    """
    Ordered mapping with O(1) keyed access and O(1) reordering.

    Combines a dict index (key -> node) with a circular doubly-linked list
    that defines iteration order. Every mutating operation updates both
    before returning, so the two views never disagree.
    """

    def __init__(self) -> None:
        self._index: dict[K, Node[K, V]] = {}
        self._list = CircularLinkedList[K, V]()
        self._version = 0

    @classmethod
    def from_collection(cls, source: object) -> "LinkedOrderedDict[Any, Any]":
        """
        Build a dict from a mapping or an iterable of (key, value) pairs.

        Pairs are applied with set() in the source's own iteration order, so a
        repeated key keeps its first position and its last value. Any other
        input (None, numbers, strings) yields an empty dict.

        Args:
            source: A LinkedOrderedDict, a Mapping, or a non-string iterable of
                2-item pairs

        Returns:
            A new LinkedOrderedDict
        """
        result: LinkedOrderedDict[Any, Any] = cls()
        if isinstance(source, LinkedOrderedDict):
            pairs = source.entries()
        elif isinstance(source, Mapping):
            pairs = source.items()
        elif isinstance(source, (str, bytes, bytearray)) or not hasattr(source, "__iter__"):
            logger.debug("from_collection: ignoring unsupported source of type %s", type(source).__name__)
            return result
        else:
            pairs = source  # type: ignore[assignment]

        for key, value in pairs:
            result.set(key, value)
        return result

    def set(self, key: K, value: V) -> "LinkedOrderedDict[K, V]":
        """
        Insert or update a key.

        An existing key keeps its position and gets the new value; a new key
        is appended at the end.

        Returns:
            The dict itself, for chaining
        """
        node = self._index.get(key)
        if node is not None:
            node.value = value
            return self

        node = Node(key, value)
        self._list.append(node)
        self._index[key] = node
        self._version += 1
        return self

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for key, or default if absent. Does not reorder."""
        node = self._index.get(key)
        return node.value if node is not None else default

    def has(self, key: K) -> bool:
        """Return True if key is present."""
        return key in self._index

    def delete(self, key: K) -> bool:
        """
        Remove a key.

        Returns:
            True if the key was removed, False if it was not present
        """
        node = self._index.pop(key, None)
        if node is None:
            return False
        self._list.remove(node)
        self._version += 1
        return True

    def pop(self) -> Entry[K, V] | None:
        """Remove and return the last (key, value) pair, or None when empty."""
        node = self._list.pop()
        if node is None:
            return None
        del self._index[node.key]
        self._version += 1
        return (node.key, node.value)

    def shift(self) -> Entry[K, V] | None:
        """Remove and return the first (key, value) pair, or None when empty."""
        node = self._list.popleft()
        if node is None:
            return None
        del self._index[node.key]
        self._version += 1
        return (node.key, node.value)

    def to_start(self, key: K) -> bool:
        """Move an existing key to the front. Returns False if the key is absent."""
        node = self._index.get(key)
        if node is None:
            return False
        self._list.move_to_front(node)
        self._version += 1
        return True

    def to_end(self, key: K) -> bool:
        """Move an existing key to the back. Returns False if the key is absent."""
        node = self._index.get(key)
        if node is None:
            return False
        self._list.move_to_back(node)
        self._version += 1
        return True

    def clear(self) -> None:
        """Remove every entry. O(1): nodes are dropped, not unlinked one by one."""
        logger.debug("clear: discarding %d entries", len(self._index))
        self._list.reset()
        self._index = {}
        self._version += 1

    def _iter_nodes(self, reverse: bool = False) -> Iterator[Node[K, V]]:
        """Walk the list in either direction, failing fast on structural changes."""
        version = self._version
        for node in (reversed(self._list) if reverse else self._list):
            yield node
            if self._version != version:
                raise MutatedDuringIterationError("LinkedOrderedDict changed during iteration")

    def keys(self) -> Iterator[K]:
        """Lazily yield keys in order."""
        for node in self._iter_nodes():
            yield node.key

    def values(self) -> Iterator[V]:
        """Lazily yield values in order."""
        for node in self._iter_nodes():
            yield node.value

    def entries(self) -> Iterator[Entry[K, V]]:
        """Lazily yield (key, value) pairs in order."""
        for node in self._iter_nodes():
            yield (node.key, node.value)

    items = entries

    def to_string(self) -> str:
        """Render as ``$ -> (k1, v1) -> (k2, v2) -> $``, or ``$ empty $``."""
        if not self._list:
            return "$ empty $"
        parts = [f"({node.key}, {node.value})" for node in self._list]
        return "$ -> " + " -> ".join(parts) + " -> $"

    __str__ = to_string

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.entries())!r})"

    def __len__(self) -> int:
        return len(self._list)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __reversed__(self) -> Iterator[K]:
        for node in self._iter_nodes(reverse=True):
            yield node.key

    def __getitem__(self, key: K) -> V:
        node = self._index.get(key)
        if node is None:
            raise MissingKeyError(key)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise MissingKeyError(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedOrderedDict):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self.entries(), other.entries()))

    __hash__ = None  # type: ignore[assignment]
