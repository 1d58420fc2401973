"""Singly linked list used to hold the vertices of a shape.

The list is anchored by a sentinel head node that never carries data, so
inserting at the front, appending and removing all walk the same chain
without special-casing the first element.

Position arguments follow the editor's historical contract rather than
Python's ``list`` semantics:

- ``insert_after`` links the new value *after* the given position, with
  ``-1`` meaning "before the first element" and anything past the end
  clamping to an append.
- ``remove_at`` treats ``0`` (or less) as the first element, anything greater
  than ``size()`` as the last element, and otherwise removes the element at
  ``position - 1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from polysketch.exceptions import PositionOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    """A single link in the chain."""

    data: T | None = None
    next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """An iterable, index-addressable singly linked list.

    Every operation except ``size`` walks the chain, so positional access is
    O(n). Iterating while the list is being structurally modified gives
    undefined results.

    Example:
        >>> items = LinkedList([1, 2, 3])
        >>> items.insert_after(9, 0)
        True
        >>> str(items)
        '[1, 9, 2, 3]'
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """Initialize the list, optionally appending ``values`` in order.

        Args:
            values: Initial values to append.
        """
        self._head: _Node[T] = _Node()
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    def size(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def append(self, value: T) -> bool:
        """Add a value to the end of the list.

        Args:
            value: The value to add.

        Returns:
            Always True.
        """
        curr = self._head
        while curr.next is not None:
            curr = curr.next
        curr.next = _Node(value)
        self._size += 1
        return True

    def insert_after(self, value: T, position: int) -> bool:
        """Insert a value after the element at ``position``.

        Args:
            value: The value to insert.
            position: Index to insert after. ``-1`` inserts at the front and
                anything at or past the last index appends.

        Returns:
            True on success, False if ``position`` is below ``-1``.
        """
        if position < -1:
            return False

        node = _Node(value)
        if position == -1 or self._head.next is None:
            node.next = self._head.next
            self._head.next = node
            self._size += 1
            return True

        position = min(position, self._size - 1)
        curr = self._head.next
        for _ in range(position):
            curr = curr.next
        node.next = curr.next
        curr.next = node
        self._size += 1
        return True

    def remove_at(self, position: int) -> T | None:
        """Remove an element and return it.

        Args:
            position: ``<= 0`` removes the first element, ``> size()`` the last
                one; otherwise the element at index ``position - 1`` is removed.

        Returns:
            The removed value, or None when the list is empty.
        """
        if self._head.next is None:
            return None

        if position <= 0:
            target_index = 0
        elif position > self._size:
            target_index = self._size - 1
        else:
            target_index = position - 1

        prev = self._head
        for _ in range(target_index):
            prev = prev.next
        removed = prev.next
        prev.next = removed.next
        self._size -= 1
        return removed.data

    def get(self, position: int) -> T:
        """Return the value at a zero-based position.

        Args:
            position: Index of the element.

        Returns:
            The value stored at ``position``.

        Raises:
            PositionOutOfRangeError: If ``position`` is negative or not below ``size()``.
        """
        if position < 0 or position >= self._size:
            raise PositionOutOfRangeError(position, self._size)
        curr = self._head.next
        for _ in range(position):
            curr = curr.next
        return curr.data

    def __getitem__(self, position: int) -> T:
        return self.get(position)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        curr = self._head.next
        while curr is not None:
            yield curr.data
            curr = curr.next

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(value) for value in self)}])"
