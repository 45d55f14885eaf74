import pytest

from handcollections.linked_list import LinkedList


def generate_test():
    return LinkedList([0, 1, 2, 3, 4, 5, 6])


def test_basic_front():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0

    lst.push_front(10)
    assert len(lst) == 1
    assert lst.pop_front() == 10
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0

    lst.push_front(10)
    assert len(lst) == 1
    lst.push_front(20)
    assert len(lst) == 2
    lst.push_front(30)
    assert len(lst) == 3
    assert lst.pop_front() == 30
    assert len(lst) == 2
    lst.push_front(40)
    assert len(lst) == 3
    assert lst.pop_front() == 40
    assert len(lst) == 2
    assert lst.pop_front() == 20
    assert len(lst) == 1
    assert lst.pop_front() == 10
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert lst.pop_front() is None
    assert len(lst) == 0


def test_basic():
    m = LinkedList()
    assert m.pop_front() is None
    assert m.pop_back() is None
    assert m.pop_front() is None
    m.push_front(1)
    assert m.pop_front() == 1
    m.push_back(2)
    m.push_back(3)
    assert len(m) == 2
    assert m.pop_front() == 2
    assert m.pop_front() == 3
    assert len(m) == 0
    assert m.pop_front() is None
    m.push_back(1)
    m.push_back(3)
    m.push_back(5)
    m.push_back(7)
    assert m.pop_front() == 1

    n = LinkedList()
    n.push_front(2)
    n.push_front(3)
    assert n.front() == 3
    n.set_front(0)
    assert n.back() == 2
    n.set_back(1)
    assert n.pop_front() == 0
    assert n.pop_front() == 1


def test_pop_back_order():
    m = LinkedList([1, 2, 3])
    assert m.pop_back() == 3
    assert m.pop_back() == 2
    assert m.pop_back() == 1
    assert m.pop_back() is None
    assert m.front() is None and m.back() is None


def test_set_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().set_front(1)
    with pytest.raises(IndexError):
        LinkedList().set_back(1)


def test_iterator():
    m = generate_test()
    assert list(enumerate(m)) == [(i, i) for i in range(7)]
    n = LinkedList()
    assert next(n.iter(), "done") == "done"
    n.push_front(4)
    it = n.iter()
    assert len(it) == 1
    assert next(it) == 4
    assert len(it) == 0
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_double_end():
    n = LinkedList()
    assert next(n.iter(), None) is None
    n.push_front(4)
    n.push_front(5)
    n.push_front(6)
    it = n.iter()
    assert len(it) == 3
    assert next(it) == 6
    assert len(it) == 2
    assert it.next_back() == 4
    assert len(it) == 1
    assert it.next_back() == 5
    with pytest.raises(StopIteration):
        it.next_back()
    with pytest.raises(StopIteration):
        next(it)


def test_rev_iter():
    m = generate_test()
    assert list(reversed(m)) == [6, 5, 4, 3, 2, 1, 0]
    n = LinkedList()
    assert list(reversed(n)) == []
    n.push_front(4)
    assert list(reversed(n)) == [4]


def test_mut_iter():
    m = generate_test()
    seen = []
    m.apply(lambda x: seen.append(x) or x * 10)
    assert seen == [0, 1, 2, 3, 4, 5, 6]
    assert list(m) == [0, 10, 20, 30, 40, 50, 60]

    n = LinkedList()
    n.push_front(4)
    n.push_back(5)
    n.apply(lambda x: x + 1)
    assert list(n) == [5, 6]


def test_iterator_mixed_double_end():
    n = LinkedList()
    with pytest.raises(StopIteration):
        n.iter().next_back()
    n.push_front(4)
    n.push_front(5)
    n.push_front(6)
    it = n.iter()
    assert next(it) == 6
    assert it.next_back() == 4
    assert it.next_back() == 5
    assert len(it) == 0


def test_eq():
    n = LinkedList([])
    m = LinkedList([])
    assert n == m
    n.push_front(1)
    assert n != m
    m.push_back(1)
    assert n == m

    assert LinkedList([2, 3, 4]) != LinkedList([1, 2, 3])


def test_ord():
    n = LinkedList([])
    m = LinkedList([1, 2, 3])
    assert n < m
    assert m > n
    assert n <= n
    assert n >= n


def test_ord_nan():
    nan = float("nan")
    n = LinkedList([nan])
    m = LinkedList([nan])
    assert not (n < m)
    assert not (n > m)
    assert not (n <= m)
    assert not (n >= m)

    n = LinkedList([nan])
    one = LinkedList([1.0])
    assert not (n < one)
    assert not (n > one)
    assert not (n <= one)
    assert not (n >= one)

    u = LinkedList([1.0, 2.0, nan])
    v = LinkedList([1.0, 2.0, 3.0])
    assert not (u < v)
    assert not (u > v)
    assert not (u <= v)
    assert not (u >= v)

    s = LinkedList([1.0, 2.0, 4.0, 2.0])
    t = LinkedList([1.0, 2.0, 3.0, 2.0])
    assert not (s < t)
    assert s > one
    assert not (s <= one)
    assert s >= one


def test_debug():
    assert repr(LinkedList(range(10))) == "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"
    words = LinkedList(["just", "one", "test", "more"])
    assert repr(words) == "['just', 'one', 'test', 'more']"


def test_hashmap():
    list1 = LinkedList(range(10))
    list2 = LinkedList(range(1, 11))
    table = {}
    table[list1.copy()] = "list1"
    table[list2.copy()] = "list2"
    assert len(table) == 2
    assert table[list1] == "list1"
    assert table[list2] == "list2"
    assert table.pop(list1) == "list1"
    assert table.pop(list2) == "list2"
    assert table == {}


def test_copy_is_independent():
    original = LinkedList([1, 2])
    cloned = original.copy()
    assert cloned == original
    original.push_back(3)
    assert list(cloned) == [1, 2]
    assert cloned != original


def test_drain_empties_list():
    lst = LinkedList([1, 2, 3])
    drained = lst.drain()
    assert len(lst) == 0
    assert list(drained) == [1, 2, 3]
    lst.push_back(9)
    assert list(lst) == [9]


def test_clear_and_extend():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert lst.pop_front() is None
    lst.extend([4, 5])
    assert list(lst) == [4, 5]
    assert lst.front() == 4
    assert lst.back() == 5