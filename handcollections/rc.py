"""Single-threaded reference-counted shared ownership."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class SharedReferenceError(Exception):
    """Raised when an operation needs the only handle but others exist."""


class DoubleDropError(Exception):
    """Raised when a handle is released more than once."""


class _RcInner(Generic[T]):
    __slots__ = ("value", "count")

    def __init__(self, value: T) -> None:
        self.value: Optional[T] = value
        self.count = 1


class Rc(Generic[T]):
    """A handle to a value shared by a counted number of handles.

    Every handle must be released once with :meth:`drop` (or by leaving a
    ``with`` block). When the last handle goes, the value is released.
    """

    __slots__ = ("_inner",)

    def __init__(self, value: T) -> None:
        self._inner: Optional[_RcInner[T]] = _RcInner(value)

    def _live(self) -> _RcInner[T]:
        if self._inner is None:
            raise ReferenceError("Rc handle has been dropped")
        return self._inner

    def clone(self) -> "Rc[T]":
        """Return a new handle to the same value, raising the count."""
        inner = self._live()
        inner.count += 1
        handle = object.__new__(type(self))
        handle._inner = inner
        return handle

    def drop(self) -> None:
        """Release this handle; the value is released with the last one."""
        inner = self._inner
        if inner is None or inner.count == 0:
            raise DoubleDropError("Double drop detected!")
        self._inner = None
        inner.count -= 1
        if inner.count == 0:
            inner.value = None

    def strong_count(self) -> int:
        """Number of live handles sharing the value."""
        return self._live().count

    def value(self) -> T:
        """The shared value."""
        return self._live().value  # type: ignore[return-value]

    def set(self, value: T) -> None:
        """Replace the value; allowed only while this is the sole handle."""
        inner = self._live()
        if inner.count != 1:
            raise SharedReferenceError(
                f"value is shared by {inner.count} handles"
            )
        inner.value = value

    def try_unwrap(self) -> T:
        """Take the value out if this is the sole handle, consuming it.

        Raises SharedReferenceError, leaving the handle intact, otherwise.
        """
        inner = self._live()
        if inner.count != 1:
            raise SharedReferenceError(
                f"value is shared by {inner.count} handles"
            )
        value = inner.value
        inner.value = None
        inner.count = 0
        self._inner = None
        return value  # type: ignore[return-value]

    def __enter__(self) -> "Rc[T]":
        self._live()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        if self._inner is not None:
            self.drop()

    def __repr__(self) -> str:
        if self._inner is None:
            return "Rc(<dropped>)"
        return f"Rc({self._inner.value!r}, count={self._inner.count})"