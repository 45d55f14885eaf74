"""Fixed-size circular storage that a double-ended queue is built on."""

from __future__ import annotations

from typing import Any, Generic, List, Tuple, TypeVar

T = TypeVar("T")

_DEFAULT_CAPACITY = 2


class _Empty:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<empty>"


_EMPTY: Any = _Empty()


class RingBuffer(Generic[T]):
    """A block of slots addressed by physical index.

    The buffer does not track which element is logically first; callers keep
    their own head and length and pass them to :meth:`grow`, which reorders
    the occupied slots so that the logical front lands at index 0.
    """

    __slots__ = ("_slots",)

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._slots: List[Any] = [_EMPTY] * capacity

    def capacity(self) -> int:
        """Number of slots."""
        return len(self._slots)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(
                f"slot {index} out of range for capacity {len(self._slots)}"
            )

    def read(self, index: int) -> T:
        """Return the value stored in slot ``index``, leaving it in place."""
        self._check(index)
        value = self._slots[index]
        if value is _EMPTY:
            raise LookupError(f"slot {index} holds no value")
        return value

    def take(self, index: int) -> T:
        """Move the value out of slot ``index``, leaving the slot empty."""
        value = self.read(index)
        self._slots[index] = _EMPTY
        return value

    def write(self, index: int, value: T) -> None:
        """Store ``value`` in slot ``index``, replacing whatever was there."""
        self._check(index)
        self._slots[index] = value

    def grow(self, head: int, length: int) -> Tuple[int, int]:
        """Double the capacity, laying the elements out in logical order.

        The ``length`` elements starting at slot ``head`` (wrapping around the
        end) are copied to slots ``0 .. length``. Returns the new head and
        tail, which are always ``(0, length)``.
        """
        capacity = len(self._slots)
        if not 0 <= length <= capacity:
            raise ValueError(
                f"length {length} out of range for capacity {capacity}"
            )
        if length and not 0 <= head < capacity:
            raise IndexError(f"head {head} out of range for capacity {capacity}")
        # An empty buffer would otherwise stay empty forever.
        new_capacity = max(capacity * 2, 1)
        ordered = [self._slots[(head + offset) % capacity] for offset in range(length)]
        self._slots = ordered + [_EMPTY] * (new_capacity - length)
        return 0, length

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={len(self._slots)}, slots={self._slots!r})"