"""Circular doubly-linked list with a single sentinel node for O(1) operations."""

from collections.abc import Iterator
from typing import Generic

from linkedodict.types import K, V


class _RootKey:
    """Marker type for the sentinel's key. Never equal to anything but itself."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<root>"


_ROOT_KEY = _RootKey()


class Node(Generic[K, V]):
    """A node in the doubly-linked list."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: Node[K, V] | None = None
        self.next: Node[K, V] | None = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.value!r})"


class CircularLinkedList(Generic[K, V]):
    """
    Circular doubly-linked list anchored on one permanent sentinel.

    ``root.next`` is the first node and ``root.prev`` the last; both point
    back at ``root`` when the list is empty, so insertion at either end and
    removal never need a null check.
    """

    def __init__(self) -> None:
        self.root: Node[K, V] = Node(_ROOT_KEY, None)  # type: ignore[arg-type]
        self.reset()

    def reset(self) -> None:
        """Drop every node by relinking the sentinel to itself. O(1)."""
        self.root.prev = self.root.next = self.root
        self._size = 0

    def _link_after(self, node: Node[K, V], anchor: Node[K, V]) -> None:
        after = anchor.next
        node.prev = anchor
        node.next = after
        anchor.next = node
        after.prev = node  # type: ignore[union-attr]

    def _unlink(self, node: Node[K, V]) -> None:
        node.prev.next = node.next  # type: ignore[union-attr]
        node.next.prev = node.prev  # type: ignore[union-attr]
        node.prev = None
        node.next = None

    def append(self, node: Node[K, V]) -> None:
        """Append node to the end of the list (before the sentinel). O(1)."""
        self._link_after(node, self.root.prev)  # type: ignore[arg-type]
        self._size += 1

    def appendleft(self, node: Node[K, V]) -> None:
        """Prepend node to the beginning of the list (after the sentinel). O(1)."""
        self._link_after(node, self.root)
        self._size += 1

    def remove(self, node: Node[K, V]) -> None:
        """Remove a node from the list and clear its links. O(1)."""
        self._unlink(node)
        self._size -= 1

    def pop(self) -> Node[K, V] | None:
        """Remove and return the last node, or None when empty. O(1)."""
        node = self.root.prev
        if node is self.root or node is None:
            return None
        self.remove(node)
        return node

    def popleft(self) -> Node[K, V] | None:
        """Remove and return the first node, or None when empty. O(1)."""
        node = self.root.next
        if node is self.root or node is None:
            return None
        self.remove(node)
        return node

    def move_to_front(self, node: Node[K, V]) -> None:
        """Relink an already-linked node right after the sentinel. O(1)."""
        if self.root.next is node:
            return
        self._unlink(node)
        self._link_after(node, self.root)

    def move_to_back(self, node: Node[K, V]) -> None:
        """Relink an already-linked node right before the sentinel. O(1)."""
        if self.root.prev is node:
            return
        self._unlink(node)
        self._link_after(node, self.root.prev)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Node[K, V]]:
        node = self.root.next
        while node is not self.root:
            yield node  # type: ignore[misc]
            node = node.next  # type: ignore[union-attr]

    def __reversed__(self) -> Iterator[Node[K, V]]:
        node = self.root.prev
        while node is not self.root:
            yield node  # type: ignore[misc]
            node = node.prev  # type: ignore[union-attr]

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
