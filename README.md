# handcollections

Small container and handle types built by hand. Each one keeps its own
bookkeeping: reference counts, capacities, and head and tail positions.

- `handcollections.rc`: `Rc`, a single-threaded reference-counted handle.
- `handcollections.arc`: `Arc` and `Weak`, a thread-safe reference-counted
  handle with weak references.
- `handcollections.vec`: `Vec`, a growable array whose capacity starts at two
  and doubles when it is full.
- `handcollections.ringbuffer`: `RingBuffer`, the circular storage that backs
  `Deque`.
- `handcollections.deque`: `Deque`, a double-ended queue on a growable ring
  buffer.
- `handcollections.linked_list`: `LinkedList`, a doubly linked list, with a
  double-ended iterator `ListIter`.

The package is a library only. It has no dependencies outside the standard
library and installs no commands.

## Installation

```
pip install .
```

Add the `test` extra to get pytest, then run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Rc

```python
from handcollections.rc import Rc

a = Rc("bob")
b = a.clone()
assert a.strong_count() == 2
assert b.value() == "bob"

b.drop()
a.set("alice")         # allowed only while this is the sole handle
assert a.try_unwrap() == "alice"
```

`set` and `try_unwrap` raise `handcollections.rc.SharedReferenceError` while
other handles are alive; a failed `try_unwrap` leaves the handle usable.
Calling `drop` on a handle that was already dropped raises `DoubleDropError`.
Any other use of a dropped handle raises `ReferenceError`. A handle is also a
context manager and drops itself when the `with` block ends, unless it was
already dropped or unwrapped.

### Arc and Weak

```python
from handcollections.arc import Arc

shared = Arc(42)
weak = shared.downgrade()
assert shared.weak_count() == 2   # one implicit weak reference plus ours

strong = weak.upgrade()
assert strong.value() == 42
strong.drop()

shared.drop()
assert weak.upgrade() is None
```

Counts are kept under a lock, so handles may be cloned and dropped from
several threads. `weak_count` includes the one weak reference that the strong
handles hold together; it goes away when the last strong handle is dropped or
unwrapped. `Weak.clone` and `Weak.drop` raise and lower the weak count.

`Arc.set` and `Arc.try_unwrap` raise `handcollections.arc.SharedReferenceError`
while other strong handles are alive. This is a separate class from the one in
`handcollections.rc`. Using a dropped `Arc` or `Weak` in any way, including
dropping it again, raises `ReferenceError`.

Handles are counted only through `clone` and `drop`. Python's garbage
collector does not touch the counts. "Releasing" the value means that the
handles stop referring to it.

### Vec

```python
from handcollections.vec import Vec

v = Vec([1, 3])
v.insert(1, 2)
assert v.as_list() == [1, 2, 3]
assert v.remove(0) == 1
assert v.get(5) is None
v.push(4)
assert v[0:2] == [2, 3]
assert v.capacity() == 4
```

- `pop` returns `None` when the Vec is empty. `get` returns `None` for an index
  out of bounds.
- `v[i]` and `v[i] = x` raise `IndexError` out of bounds. Negative indices count
  as out of bounds.
- Slices must be contiguous, and the bounds must lie within the length.
  Assigning to a slice must keep its length.
- `insert` accepts an index from 0 up to the length. `remove` accepts an index
  below the length. Both raise `IndexError` otherwise.
- `apply(func)` replaces every value with `func(value)`.
- `drain()` moves all values out and leaves the Vec empty.
- `copy()` returns an independent Vec.

### Deque

```python
from handcollections.deque import Deque

d = Deque()
d.push_back(1)
d.push_front(2)
d.push_back(3)
assert list(d) == [2, 1, 3]
assert d.peek_front() == 2 and d.peek_back() == 3
assert d.pop_front() == 2
assert 3 in d
```

- A new deque has room for two values. `Deque.with_capacity(n)` starts with
  room for `n` values.
- When the deque is full, the capacity doubles. `is_full()` tells whether the
  next push will grow it.
- Pops and peeks return `None` when the deque is empty.
- `get(i)` returns `None` out of bounds. `d[i]` and `d[i] = x` raise
  `IndexError`.
- `clear()` empties the deque and keeps its capacity.
- The deque also has `extend`, `apply`, `drain` and `copy`.
- Deques are equal when they hold equal values in the same order. They order
  lexicographically. Deques are not hashable.

### RingBuffer

`RingBuffer(capacity=2)` is a block of slots addressed by physical index:

- `write`, `read` and `take` work on one slot. `take` moves the value out and
  leaves the slot empty.
- Reading an empty slot raises `LookupError`. An index outside the capacity
  raises `IndexError`.
- `grow(head, length)` doubles the capacity, or makes it 1 when it was 0. It
  copies the `length` values that start at `head`, wrapping around the end, to
  slots `0 .. length`, and returns `(0, length)`.

### LinkedList

```python
from handcollections.linked_list import LinkedList

items = LinkedList(range(5))
it = items.iter()
assert next(it) == 0
assert it.next_back() == 4
assert len(it) == 3
assert list(reversed(items)) == [4, 3, 2, 1, 0]

lookup = {LinkedList([1, 2]): "pair"}
assert lookup[LinkedList([1, 2])] == "pair"
```

- `front()` and `back()` return `None` on an empty list. `set_front` and
  `set_back` raise `IndexError` on an empty list.
- A `ListIter` yields each value once, from whichever end is advanced.
  `next_back()` raises `StopIteration` when the iterator is exhausted.
- The list also has `extend`, `apply`, `drain`, `clear` and `copy`.
- The repr looks like a Python list, for example `[0, 1, 2]`.

Linked lists and deques compare element by element. When two elements are
not ordered against each other, as with NaN, every ordering comparison returns
false.