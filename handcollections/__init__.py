"""Hand-built containers and reference-counted handles: Rc, Arc/Weak, Vec, RingBuffer, Deque, LinkedList."""

__version__ = "0.1.0"
__all__ = ["arc", "deque", "linked_list", "rc", "ringbuffer", "vec"]