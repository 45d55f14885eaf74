"""A growable sequence with explicit, doubling capacity."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union, overload

T = TypeVar("T")

_INITIAL_CAPACITY = 2


class Vec(Generic[T]):
    """An ordered, growable sequence.

    Capacity starts at two and doubles whenever a push or insert finds the
    sequence full.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = []
        self._capacity = _INITIAL_CAPACITY
        if iterable is not None:
            for value in iterable:
                self.push(value)

    def _reserve_one(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def push(self, value: T) -> None:
        """Append a value at the end."""
        self._reserve_one()
        self._items.append(value)

    def pop(self) -> Optional[T]:
        """Remove and return the last value, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def get(self, index: int) -> Optional[T]:
        """Return the value at ``index``, or None when it is out of bounds."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def capacity(self) -> int:
        """Number of values that fit before the next growth."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of bounds")

    def _check_slice(self, index: slice) -> None:
        if index.step not in (None, 1):
            raise ValueError("only contiguous ranges are supported")
        start = 0 if index.start is None else index.start
        stop = len(self._items) if index.stop is None else index.stop
        if start < 0 or stop < 0:
            raise IndexError("range bounds must not be negative")
        if stop > len(self._items):
            raise IndexError(
                f"range end {stop} out of range for length {len(self._items)}"
            )
        if start > stop:
            raise IndexError(f"range starts at {start} but ends at {stop}")

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        if isinstance(index, slice):
            self._check_slice(index)
            return self._items[index]
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: Union[int, slice], value) -> None:
        if isinstance(index, slice):
            self._check_slice(index)
            values = list(value)
            if len(values) != len(self._items[index]):
                raise ValueError("range assignment must keep the length")
            self._items[index] = values
            return
        self._check_index(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def apply(self, func: Callable[[T], T]) -> None:
        """Replace every value in place with ``func(value)``."""
        self._items[:] = [func(value) for value in self._items]

    def drain(self) -> Iterator[T]:
        """Move every value out, in order, leaving the sequence empty."""
        items, self._items = self._items, []
        return iter(items)

    def as_list(self) -> List[T]:
        """A list holding the current values."""
        return list(self._items)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the length."""
        if not 0 <= index <= len(self._items):
            raise IndexError(
                f"insertion index {index} out of range for length {len(self._items)}"
            )
        self._reserve_one()
        self._items.insert(index, value)

    def remove(self, index: int) -> T:
        """Remove and return the value at ``index``, shifting later values left."""
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"removal index {index} out of range for length {len(self._items)}"
            )
        return self._items.pop(index)

    def copy(self) -> "Vec[T]":
        """A new Vec holding the same values."""
        return Vec(self._items)

    def __repr__(self) -> str:
        return f"Vec({self._items!r})"