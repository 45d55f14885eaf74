"""A double-ended queue stored in a growable circular buffer."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from handcollections.ringbuffer import RingBuffer

T = TypeVar("T")


def _partial_cmp(left: Iterable[Any], right: Iterable[Any]) -> Optional[int]:
    """Compare two sequences lexicographically.

    Returns -1, 0 or 1, or None when a pair of elements is unordered
    (as with NaN).
    """
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


class Deque(Generic[T]):
    """A double-ended queue whose capacity doubles when it fills up.

    Index 0 is the front. A new deque has room for two values.
    """

    __slots__ = ("_buf", "_head", "_tail", "_len")

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._buf: RingBuffer[T] = RingBuffer()
        self._head = 0
        self._tail = 0
        self._len = 0
        if iterable is not None:
            self.extend(iterable)

    @classmethod
    def with_capacity(cls, capacity: int) -> "Deque[T]":
        """An empty deque with room for ``capacity`` values before growing."""
        deque = cls()
        deque._buf = RingBuffer(capacity)
        return deque

    def _reserve_one(self) -> None:
        if self._len == self._buf.capacity():
            self._head, self._tail = self._buf.grow(self._head, self._len)

    def _slot(self, index: int) -> int:
        return (self._head + index) % self._buf.capacity()

    def push_back(self, value: T) -> None:
        """Add a value at the back."""
        self._reserve_one()
        self._buf.write(self._tail, value)
        self._tail = (self._tail + 1) % self._buf.capacity()
        self._len += 1

    def push_front(self, value: T) -> None:
        """Add a value at the front."""
        self._reserve_one()
        capacity = self._buf.capacity()
        self._head = (self._head + capacity - 1) % capacity
        self._buf.write(self._head, value)
        self._len += 1

    def pop_back(self) -> Optional[T]:
        """Remove and return the back value, or None when empty."""
        if self._len == 0:
            return None
        capacity = self._buf.capacity()
        self._tail = (self._tail - 1 + capacity) % capacity
        self._len -= 1
        return self._buf.take(self._tail)

    def pop_front(self) -> Optional[T]:
        """Remove and return the front value, or None when empty."""
        if self._len == 0:
            return None
        value = self._buf.take(self._head)
        self._head = (self._head + 1) % self._buf.capacity()
        self._len -= 1
        return value

    def peek_back(self) -> Optional[T]:
        """The back value, or None when empty."""
        if self._len == 0:
            return None
        return self._buf.read(self._slot(self._len - 1))

    def peek_front(self) -> Optional[T]:
        """The front value, or None when empty."""
        if self._len == 0:
            return None
        return self._buf.read(self._head)

    def __len__(self) -> int:
        return self._len

    def capacity(self) -> int:
        """Number of values that fit before the next growth."""
        return self._buf.capacity()

    def is_full(self) -> bool:
        """Whether the next push will grow the storage."""
        return self._len == self._buf.capacity()

    def get(self, index: int) -> Optional[T]:
        """The value at logical ``index``, or None when out of bounds."""
        if not 0 <= index < self._len:
            return None
        return self._buf.read(self._slot(index))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._len:
            raise IndexError(
                f"index {index} out of range for length {self._len}"
            )

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._buf.read(self._slot(index))

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._buf.write(self._slot(index), value)

    def clear(self) -> None:
        """Remove every value, keeping the current capacity."""
        for offset in range(self._len):
            self._buf.take(self._slot(offset))
        self._len = 0
        self._head = 0
        self._tail = 0

    def __contains__(self, value: object) -> bool:
        return any(value == item for item in self)

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._len):
            yield self._buf.read(self._slot(offset))

    def apply(self, func: Callable[[T], T]) -> None:
        """Replace every value in place with ``func(value)``, front to back."""
        for offset in range(self._len):
            slot = self._slot(offset)
            self._buf.write(slot, func(self._buf.read(slot)))

    def drain(self) -> Iterator[T]:
        """Move every value out, front to back, leaving the deque empty."""
        values = list(self)
        self.clear()
        return iter(values)

    def extend(self, iterable: Iterable[T]) -> None:
        """Push every value of ``iterable`` at the back, in order."""
        for value in iterable:
            self.push_back(value)

    def copy(self) -> "Deque[T]":
        """A new deque holding the same values."""
        return Deque(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        if self._len != other._len:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return _partial_cmp(self, other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return _partial_cmp(self, other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return _partial_cmp(self, other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return _partial_cmp(self, other) in (1, 0)

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"