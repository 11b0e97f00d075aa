"""Singly linked list with a forward cursor that can edit the list in place."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .errors import (
    EmptyListError,
    EndOfSequenceError,
    IllegalCursorStateError,
    IndexOutOfRangeError,
    InvalidPositionError,
    UnsupportedBackwardTraversalError,
)

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """Node in a singly linked list."""

    data: T
    next: Optional["Node[T]"] = field(default=None, repr=False)

    def __str__(self) -> str:
        return str(self.data)


@dataclass(frozen=True)
class _PendingEdit(Generic[T]):
    """Node returned by the last ``next()`` and the node linking to it."""

    node: Node[T]
    predecessor: Optional[Node[T]]


class SinglyLinkedList(Generic[T]):
    """Ordered container of equality-comparable values.

    Elements only need ``==``; nothing is hashed or ordered.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._size = 0
        if values is not None:
            tail: Optional[Node[T]] = None
            for value in values:
                node = Node(value)
                self._link(tail, node)
                tail = node
                self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def add_front(self, element: T) -> None:
        """Link a new node before the current head."""
        self._head = Node(element, self._head)
        self._size += 1

    def add_back(self, element: T) -> None:
        """Walk to the last node and append after it."""
        node = Node(element)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def insert_at(self, position: int, element: T) -> None:
        """Insert so that ``get(position)`` returns ``element`` afterwards."""
        if position < 0 or position > self._size:
            raise InvalidPositionError(f"Invalid position {position} for a list of size {self._size}.")
        if position == 0:
            self.add_front(element)
            return
        predecessor = self._node_at(position - 1)
        predecessor.next = Node(element, predecessor.next)
        self._size += 1

    def get(self, position: int) -> T:
        if position < 0 or position >= self._size:
            raise InvalidPositionError(f"Invalid position {position} for a list of size {self._size}.")
        return self._node_at(position).data

    def remove_value(self, element: T) -> bool:
        """Unlink the first node equal to ``element``; report whether one was found."""
        predecessor: Optional[Node[T]] = None
        node = self._head
        while node is not None:
            if node.data == element:
                self._link(predecessor, node.next)
                node.next = None
                self._size -= 1
                return True
            predecessor = node
            node = node.next
        return False

    def remove_front(self) -> T:
        if self._head is None:
            raise EmptyListError("The list is empty.")
        node = self._head
        self._head = node.next
        node.next = None
        self._size -= 1
        return node.data

    def remove_at(self, position: int) -> T:
        if position < 0 or position >= self._size:
            raise InvalidPositionError(f"Invalid position {position} for a list of size {self._size}.")
        if position == 0:
            return self.remove_front()
        predecessor = self._node_at(position - 1)
        node = predecessor.next
        assert node is not None  # position < size
        predecessor.next = node.next
        node.next = None
        self._size -= 1
        return node.data

    def contains(self, element: T) -> bool:
        node = self._head
        while node is not None:
            if node.data == element:
                return True
            node = node.next
        return False

    def count_unique(self) -> int:
        """Count elements at their first occurrence.

        Every node is compared against the nodes before it, so the count
        needs O(n^2) comparisons and O(1) extra space, and works for
        unhashable elements.
        """
        unique = 0
        node = self._head
        while node is not None:
            earlier = self._head
            while earlier is not node:
                assert earlier is not None
                if earlier.data == node.data:
                    break
                earlier = earlier.next
            else:
                unique += 1
            node = node.next
        return unique

    def to_display_string(self) -> str:
        return " -> ".join(str(element) for element in self)

    def to_list(self) -> list[T]:
        return list(self)

    def iterate(self) -> ListCursor[T]:
        return ListCursor(self)

    def cursor_at(self, index: int) -> ListCursor[T]:
        """Return a cursor whose first ``next()`` yields the element at ``index``."""
        return ListCursor(self, index)

    def _node_at(self, position: int) -> Node[T]:
        node = self._head
        for _ in range(position):
            assert node is not None  # callers validate position
            node = node.next
        assert node is not None
        return node

    def _link(self, predecessor: Optional[Node[T]], node: Optional[Node[T]]) -> None:
        """Point ``predecessor`` (or the head when it is None) at ``node``."""
        if predecessor is None:
            self._head = node
        else:
            predecessor.next = node


class ListCursor(Generic[T]):
    """Forward-only cursor that can insert, replace and remove while walking.

    ``set`` and ``remove`` act on the node returned by the most recent
    ``next()`` and are allowed once per ``next()``. Any structural edit made
    through another handle leaves the cursor in an undefined state.
    """

    def __init__(self, owner: SinglyLinkedList[T], index: int = 0) -> None:
        if index < 0 or index > len(owner):
            raise IndexOutOfRangeError(f"Cursor index {index} is outside 0..{len(owner)}.")
        self._list = owner
        self._previous: Optional[Node[T]] = None
        self._current = owner._head
        for _ in range(index):
            assert self._current is not None
            self._previous = self._current
            self._current = self._current.next
        self._index = index
        self._pending: Optional[_PendingEdit[T]] = None

    def __iter__(self) -> ListCursor[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()

    @property
    def has_pending_edit(self) -> bool:
        """Whether ``set`` or ``remove`` is allowed right now."""
        return self._pending is not None

    def has_next(self) -> bool:
        return self._current is not None

    def next(self) -> T:
        if self._current is None:
            raise EndOfSequenceError("No element left in the list.")
        node = self._current
        self._pending = _PendingEdit(node=node, predecessor=self._previous)
        self._previous = node
        self._current = node.next
        self._index += 1
        return node.data

    def has_previous(self) -> bool:
        return False

    def previous(self) -> T:
        raise UnsupportedBackwardTraversalError("A singly linked list cannot be traversed backwards.")

    def next_index(self) -> int:
        return self._index

    def previous_index(self) -> int:
        return self._index - 1

    def remove(self) -> None:
        """Unlink the node returned by the last ``next()``."""
        pending = self._take_pending("remove")
        self._list._link(pending.predecessor, pending.node.next)
        pending.node.next = None
        self._previous = pending.predecessor
        self._list._size -= 1
        self._index -= 1

    def set(self, element: T) -> None:
        """Replace the data of the node returned by the last ``next()``."""
        pending = self._take_pending("set")
        pending.node.data = element

    def insert(self, element: T) -> None:
        """Splice ``element`` in before the node the next ``next()`` returns."""
        node = Node(element, self._current)
        self._list._link(self._previous, node)
        self._previous = node
        self._list._size += 1
        self._index += 1
        self._pending = None

    def _take_pending(self, operation: str) -> _PendingEdit[T]:
        pending = self._pending
        if pending is None:
            raise IllegalCursorStateError(f"{operation}() requires a preceding next().")
        self._pending = None
        return pending
