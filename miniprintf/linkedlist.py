"""A singly linked list that keeps track of its first and last nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    content: T
    next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list of arbitrary items."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.append(item)

    def append(self, item: T) -> None:
        """Add ``item`` at the end of the list."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, item: T) -> None:
        """Add ``item`` at the front of the list."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the last item; raise IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def pop_first(self, on_delete: Callable[[T], Any] | None = None) -> T:
        """Remove and return the first item, passing it to ``on_delete`` first."""
        node = self._head
        if node is None:
            raise IndexError("pop_first() on an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if on_delete is not None:
            on_delete(node.content)
        return node.content

    def clear(self, on_delete: Callable[[T], Any] | None = None) -> None:
        """Remove every item, passing each to ``on_delete`` from first to last."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if on_delete is not None:
                on_delete(node.content)
            node = following

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item, from first to last."""
        for item in self:
            func(item)

    def map(self, func: Callable[[T], U]) -> LinkedList[U]:
        """Return a new list holding ``func(item)`` for every item."""
        return LinkedList(func(item) for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"