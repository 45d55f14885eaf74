"""Thread-safe reference-counted shared ownership with weak handles."""

from __future__ import annotations

import threading
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class SharedReferenceError(Exception):
    """Raised when an operation needs the only strong handle but others exist."""


class _ArcInner(Generic[T]):
    __slots__ = ("value", "strong", "weak", "lock")

    def __init__(self, value: T) -> None:
        self.value: Optional[T] = value
        self.strong = 1
        # The strong handles together hold one weak reference.
        self.weak = 1
        self.lock = threading.Lock()


class Arc(Generic[T]):
    """A strong handle to a value shared across threads.

    Every handle must be released once with :meth:`drop` (or by leaving a
    ``with`` block). When the last strong handle goes, the value is released
    and weak handles can no longer be upgraded.
    """

    __slots__ = ("_inner",)

    def __init__(self, value: T) -> None:
        self._inner: Optional[_ArcInner[T]] = _ArcInner(value)

    @classmethod
    def _from_inner(cls, inner: _ArcInner[T]) -> "Arc[T]":
        handle = object.__new__(cls)
        handle._inner = inner
        return handle

    def _live(self) -> _ArcInner[T]:
        if self._inner is None:
            raise ReferenceError("Arc handle has been dropped")
        return self._inner

    def clone(self) -> "Arc[T]":
        """Return a new strong handle, raising the strong count."""
        inner = self._live()
        with inner.lock:
            inner.strong += 1
        return Arc._from_inner(inner)

    def drop(self) -> None:
        """Release this strong handle."""
        inner = self._live()
        self._inner = None
        with inner.lock:
            inner.strong -= 1
            if inner.strong == 0:
                inner.value = None
                inner.weak -= 1

    def strong_count(self) -> int:
        """Number of live strong handles."""
        inner = self._live()
        with inner.lock:
            return inner.strong

    def weak_count(self) -> int:
        """Number of weak references, counting the one the strong handles hold."""
        inner = self._live()
        with inner.lock:
            return inner.weak

    def value(self) -> T:
        """The shared value."""
        return self._live().value  # type: ignore[return-value]

    def set(self, value: T) -> None:
        """Replace the value; allowed only while this is the sole strong handle."""
        inner = self._live()
        with inner.lock:
            if inner.strong != 1:
                raise SharedReferenceError(
                    f"value is shared by {inner.strong} handles"
                )
            inner.value = value

    def try_unwrap(self) -> T:
        """Take the value out if this is the sole strong handle, consuming it.

        Raises SharedReferenceError, leaving the handle intact, otherwise.
        """
        inner = self._live()
        with inner.lock:
            if inner.strong != 1:
                raise SharedReferenceError(
                    f"value is shared by {inner.strong} handles"
                )
            value = inner.value
            inner.value = None
            inner.strong = 0
            inner.weak -= 1
        self._inner = None
        return value  # type: ignore[return-value]

    def downgrade(self) -> "Weak[T]":
        """Return a weak handle to the same value."""
        inner = self._live()
        with inner.lock:
            inner.weak += 1
        return Weak(inner)

    def __enter__(self) -> "Arc[T]":
        self._live()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        if self._inner is not None:
            self.drop()

    def __repr__(self) -> str:
        if self._inner is None:
            return "Arc(<dropped>)"
        return f"Arc({self._inner.value!r}, strong={self._inner.strong})"


class Weak(Generic[T]):
    """A handle that does not keep the value alive; obtained from Arc.downgrade."""

    __slots__ = ("_inner",)

    def __init__(self, inner: _ArcInner[T]) -> None:
        self._inner: Optional[_ArcInner[T]] = inner

    def _live(self) -> _ArcInner[T]:
        if self._inner is None:
            raise ReferenceError("Weak handle has been dropped")
        return self._inner

    def upgrade(self) -> Optional[Arc[T]]:
        """Return a new strong handle, or None once the value is gone."""
        inner = self._live()
        with inner.lock:
            if inner.strong == 0:
                return None
            inner.strong += 1
        return Arc._from_inner(inner)

    def clone(self) -> "Weak[T]":
        """Return another weak handle, raising the weak count."""
        inner = self._live()
        with inner.lock:
            inner.weak += 1
        return Weak(inner)

    def drop(self) -> None:
        """Release this weak handle."""
        inner = self._live()
        self._inner = None
        with inner.lock:
            inner.weak -= 1

    def __repr__(self) -> str:
        return "Weak(<dropped>)" if self._inner is None else "Weak(...)"