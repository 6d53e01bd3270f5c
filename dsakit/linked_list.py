"""Singly and doubly linked lists with one-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None
        self.prev: _Node | None = None


def _forward(head: _Node | None) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.value
        node = node.next


def _position_of(values: Iterable[Any], value: Any) -> int:
    for position, item in enumerate(values, 1):
        if item == value:
            return position
    return -1


def _node_at(head: _Node, position: int) -> _Node:
    node = head
    for _ in range(position - 1):
        node = node.next
    return node


def _check_insert(length: int, position: int) -> None:
    if not 1 <= position <= length + 1:
        raise IndexError(f"insert position {position} out of range")


def _check_delete(length: int, position: int) -> None:
    if not length:
        raise IndexError("delete from an empty list")
    if not 1 <= position <= length:
        raise IndexError(f"delete position {position} out of range")


class SinglyLinkedList:
    """Linked list with forward links only."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return _forward(self._head)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def find(self, value: Any) -> int:
        """One-based position of the first matching value, or -1."""
        return _position_of(self, value)

    def prepend(self, value: Any) -> None:
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def append(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert(self, position: int, value: Any) -> None:
        """Insert so that value ends up at the one-based position."""
        _check_insert(self._length, position)
        if position == 1:
            self.prepend(value)
        elif position == self._length + 1:
            self.append(value)
        else:
            previous = _node_at(self._head, position - 1)
            node = _Node(value)
            node.next = previous.next
            previous.next = node
            self._length += 1

    def delete(self, position: int) -> Any:
        """Remove and return the value at the one-based position."""
        _check_delete(self._length, position)
        if position == 1:
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            previous = _node_at(self._head, position - 1)
            removed = previous.next
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        removed.next = None
        self._length -= 1
        return removed.value


class DoublyLinkedList:
    """Linked list with links in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return _forward(self._head)

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def find(self, value: Any) -> int:
        """One-based position of the first matching value, or -1."""
        return _position_of(self, value)

    def prepend(self, value: Any) -> None:
        node = _Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._length += 1

    def append(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert(self, position: int, value: Any) -> None:
        """Insert so that value ends up at the one-based position."""
        _check_insert(self._length, position)
        if position == 1:
            self.prepend(value)
        elif position == self._length + 1:
            self.append(value)
        else:
            previous = _node_at(self._head, position - 1)
            following = previous.next
            node = _Node(value)
            node.prev, node.next = previous, following
            previous.next = node
            following.prev = node
            self._length += 1

    def delete(self, position: int) -> Any:
        """Remove and return the value at the one-based position."""
        _check_delete(self._length, position)
        removed = _node_at(self._head, position)
        if removed.prev is None:
            self._head = removed.next
        else:
            removed.prev.next = removed.next
        if removed.next is None:
            self._tail = removed.prev
        else:
            removed.next.prev = removed.prev
        removed.prev = removed.next = None
        self._length -= 1
        return removed.value