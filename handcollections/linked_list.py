"""A doubly linked list with pushes and pops at both ends."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Optional[_Node[T]] = None
        self.next: Optional[_Node[T]] = None


def _partial_cmp(left: Iterable[Any], right: Iterable[Any]) -> Optional[int]:
    """Lexicographic comparison: -1, 0 or 1, or None for unordered elements."""
    left_iter = iter(left)
    right_iter = iter(right)
    sentinel = object()
    while True:
        a = next(left_iter, sentinel)
        b = next(right_iter, sentinel)
        if a is sentinel and b is sentinel:
            return 0
        if a is sentinel:
            return -1
        if b is sentinel:
            return 1
        if a == b:
            continue
        if a < b:
            return -1
        if a > b:
            return 1
        return None


class ListIter(Generic[T]):
    """An iterator over a list that can be advanced from either end.

    The front and back meet in the middle; every element is yielded once.
    """

    __slots__ = ("_front", "_back", "_remaining")

    def __init__(
        self, front: Optional[_Node[T]], back: Optional[_Node[T]], length: int
    ) -> None:
        self._front = front
        self._back = back
        self._remaining = length

    def __iter__(self) -> "ListIter[T]":
        return self

    def __next__(self) -> T:
        if self._remaining == 0 or self._front is None:
            raise StopIteration
        node = self._front
        self._front = node.next
        self._remaining -= 1
        return node.value

    def next_back(self) -> T:
        """Yield the next element from the back; raises StopIteration when done."""
        if self._remaining == 0 or self._back is None:
            raise StopIteration
        node = self._back
        self._back = node.prev
        self._remaining -= 1
        return node.value

    def __len__(self) -> int:
        return self._remaining


class LinkedList(Generic[T]):
    """A doubly linked list. Equal lists hash equally."""

    __slots__ = ("_front", "_back", "_len")

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._front: Optional[_Node[T]] = None
        self._back: Optional[_Node[T]] = None
        self._len = 0
        if iterable is not None:
            self.extend(iterable)

    def push_front(self, value: T) -> None:
        """Add a value at the front."""
        node = _Node(value)
        if self._front is None:
            self._back = node
        else:
            self._front.prev = node
            node.next = self._front
        self._front = node
        self._len += 1

    def push_back(self, value: T) -> None:
        """Add a value at the back."""
        node = _Node(value)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
            node.prev = self._back
        self._back = node
        self._len += 1

    def pop_front(self) -> Optional[T]:
        """Remove and return the front value, or None when empty."""
        node = self._front
        if node is None:
            return None
        self._front = node.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        self._len -= 1
        return node.value

    def pop_back(self) -> Optional[T]:
        """Remove and return the back value, or None when empty."""
        node = self._back
        if node is None:
            return None
        self._back = node.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        self._len -= 1
        return node.value

    def front(self) -> Optional[T]:
        """The front value, or None when empty."""
        return None if self._front is None else self._front.value

    def back(self) -> Optional[T]:
        """The back value, or None when empty."""
        return None if self._back is None else self._back.value

    def set_front(self, value: T) -> None:
        """Replace the front value; raises IndexError when empty."""
        if self._front is None:
            raise IndexError("set_front on an empty list")
        self._front.value = value

    def set_back(self, value: T) -> None:
        """Replace the back value; raises IndexError when empty."""
        if self._back is None:
            raise IndexError("set_back on an empty list")
        self._back.value = value

    def __len__(self) -> int:
        return self._len

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._front
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __reversed__(self) -> Iterator[T]:
        node = self._back
        while node is not None:
            yield node.value
            node = node.prev

    def iter(self) -> ListIter[T]:
        """A double-ended iterator over the values, front to back."""
        return ListIter(self._front, self._back, self._len)

    def apply(self, func: Callable[[T], T]) -> None:
        """Replace every value in place with ``func(value)``, front to back."""
        for node in self._nodes():
            node.value = func(node.value)

    def drain(self) -> Iterator[T]:
        """Move every value out, front to back, leaving the list empty."""
        node = self._front
        self._front = None
        self._back = None
        self._len = 0

        def values() -> Iterator[T]:
            current = node
            while current is not None:
                yield current.value
                current = current.next

        return values()

    def clear(self) -> None:
        """Remove every value."""
        while self._len:
            self.pop_front()

    def extend(self, iterable: Iterable[T]) -> None:
        """Push every value of ``iterable`` at the back, in order."""
        for value in iterable:
            self.push_back(value)

    def copy(self) -> "LinkedList[T]":
        """A new list holding the same values."""
        return LinkedList(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._len != other._len:
            return False
        return all(a == b for a, b in zip(self, other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) in (1, 0)

    def __hash__(self) -> int:
        return hash((self._len, tuple(self)))

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(value) for value in self) + "]"