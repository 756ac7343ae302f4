"""Doubly linked list with node handles and optional release callbacks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from itertools import islice
from typing import Any

from .rand_utils import rand_int

OnFree = Callable[["Node"], None]


class Node:
    """A node of a LinkedList holding one value."""

    __slots__ = ("value", "previous", "next", "_owner")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.previous: Node | None = None
        self.next: Node | None = None
        self._owner: LinkedList | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """A doubly linked list.

    Values are iterated in order; the nodes themselves are reachable through
    ``nodes()``, ``head()``, ``tail()`` and ``at()``.
    """

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        """Create a list from values, stopping at the first None."""
        self._head: Node | None = None
        self._tail: Node | None = None
        self._count = 0
        if values is not None:
            for value in values:
                if value is None:
                    break
                self.add(value)

    @classmethod
    def from_array(cls, array: Iterable[Any], count: int | None = None) -> LinkedList:
        """Create a list from the first count items of array, None included."""
        items = list(array) if count is None else list(islice(array, count))
        if count is not None and len(items) < count:
            raise ValueError(f"array holds fewer than {count} items")
        result = cls()
        for value in items:
            result.add(value)
        return result

    # -- internal helpers -------------------------------------------------

    def _node_at(self, index: int) -> Node:
        current = self._head
        for _ in range(index):
            current = current.next
        return current

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexError(f"index {index} out of range for list of {self._count}")

    def _unlink(self, node: Node) -> Node:
        if node.previous is not None:
            node.previous.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.previous = node.previous
        else:
            self._tail = node.previous
        node.next = node.previous = None
        node._owner = None
        self._count -= 1
        return node

    def _cut_after(self, index: int) -> list[Node]:
        current = self._node_at(index)
        removed = []
        node = current.next
        current.next = None
        self._tail = current
        while node is not None:
            following = node.next
            node.previous = node.next = None
            node._owner = None
            self._count -= 1
            removed.append(node)
            node = following
        return removed

    # -- insertion ----------------------------------------------------------

    def add(self, value: Any) -> Node:
        """Append value and return its new node."""
        node = Node(value)
        node._owner = self
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.previous = self._tail
            self._tail = node
        self._count += 1
        return node

    def insert_at(self, index: int, value: Any) -> Node:
        """Insert value at index; an index equal to the length appends."""
        if not 0 <= index <= self._count:
            raise IndexError(f"index {index} out of range for insertion")
        if index == self._count:
            return self.add(value)
        current = self._node_at(index)
        node = Node(value)
        node._owner = self
        node.next = current
        node.previous = current.previous
        if current.previous is not None:
            current.previous.next = node
        else:
            self._head = node
        current.previous = node
        self._count += 1
        return node

    # -- removal ------------------------------------------------------------

    def remove(self, node: Node) -> Node:
        """Detach node from this list and return it."""
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
        return self._unlink(node)

    def remove_at(self, index: int) -> Node:
        """Detach the node at index and return it."""
        self._check_index(index)
        return self._unlink(self._node_at(index))

    def remove_after(self, index: int) -> list[Node]:
        """Detach every node after index and return them.

        An index outside the list leaves it unchanged.
        """
        if not 0 <= index < self._count:
            return []
        return self._cut_after(index)

    def free_at(self, index: int, on_free: OnFree | None = None) -> None:
        """Remove the node at index, passing it to on_free.

        An index outside the list leaves it unchanged.
        """
        if not 0 <= index < self._count:
            return
        node = self._unlink(self._node_at(index))
        if on_free is not None:
            on_free(node)

    def free_after(self, index: int, on_free: OnFree | None = None) -> None:
        """Remove every node after index, passing each to on_free.

        An index outside the list leaves it unchanged.
        """
        for node in self.remove_after(index):
            if on_free is not None:
                on_free(node)

    def clear(self, on_free: OnFree | None = None) -> None:
        """Remove every node, passing each to on_free in order."""
        nodes = list(self.nodes())
        self._head = self._tail = None
        self._count = 0
        for node in nodes:
            node.previous = node.next = None
            node._owner = None
            if on_free is not None:
                on_free(node)

    # -- access -------------------------------------------------------------

    def head(self) -> Node | None:
        """Return the first node, or None when empty."""
        return self._head

    def tail(self) -> Node | None:
        """Return the last node, or None when empty."""
        return self._tail

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield each node in order; nodes may be removed while iterating."""
        current = self._head
        while current is not None:
            following = current.next
            yield current
            current = following

    def at(self, index: int) -> Node:
        """Return the node at index."""
        self._check_index(index)
        return self._node_at(index)

    def random(self) -> Node:
        """Return a randomly chosen node."""
        if self._count == 0:
            raise IndexError("cannot choose from an empty list")
        return self._node_at(rand_int(0, self._count - 1))

    def for_each(self, func: Callable[[Node], Any] | None) -> None:
        """Call func on each node in order; func may remove the node."""
        if func is None:
            return
        for node in self.nodes():
            func(node)

    # -- reordering and queries --------------------------------------------

    def sort(self, compare: Callable[[Node, Node], int]) -> None:
        """Stably sort the nodes in place using a three-way node comparison."""
        ordered = sorted(self.nodes(), key=cmp_to_key(compare))
        previous = None
        for node in ordered:
            node.previous = previous
            node.next = None
            if previous is not None:
                previous.next = node
            previous = node
        self._head = ordered[0] if ordered else None
        self._tail = previous

    def find(self, predicate: Callable[[Node, Any], bool], context: Any = None) -> Any:
        """Return the value of the first node matching predicate, or None."""
        return next(
            (node.value for node in self.nodes() if predicate(node, context)), None
        )

    def select(
        self, predicate: Callable[[Node, Any], bool], context: Any = None
    ) -> LinkedList:
        """Return a new list of the values whose nodes match predicate."""
        selection = LinkedList()
        for node in self.nodes():
            if predicate(node, context):
                selection.add(node.value)
        return selection

    def concat(self, other: LinkedList) -> None:
        """Move every node of other to the end of this list, emptying other."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._count == 0:
            return
        for node in other.nodes():
            node._owner = self
        if self._count == 0:
            self._head = other._head
        else:
            self._tail.next = other._head
            other._head.previous = self._tail
        self._tail = other._tail
        self._count += other._count
        other._head = other._tail = None
        other._count = 0