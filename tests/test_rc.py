import weakref

import pytest

from handcollections.rc import DoubleDropError, Rc, SharedReferenceError


class Tracker:
    def __init__(self, name):
        self.name = name


def test_basics():
    my_rc = Rc("bob")
    assert my_rc.strong_count() == 1

    mc_clone = my_rc.clone()
    assert mc_clone.strong_count() == 2
    assert my_rc.strong_count() == 2
    assert mc_clone.value() == "bob"


def test_drop_behavior_releases_value_once():
    a = Rc(Tracker("a"))
    ref = weakref.ref(a.value())
    b = a.clone()
    c = b.clone()
    assert a.strong_count() == 3

    c.drop()
    b.drop()
    assert ref() is not None and ref().name == "a"
    assert a.strong_count() == 1

    a.drop()
    assert ref() is None


def test_context_manager_drops_handles():
    outer = Rc(Tracker("ctx"))
    ref = weakref.ref(outer.value())
    with outer:
        with outer.clone() as inner:
            assert inner.strong_count() == 2
        assert outer.strong_count() == 1
    assert ref() is None


def test_get_mut_ref_only_when_unique():
    rc = Rc(42)
    assert rc.strong_count() == 1

    rc.set(100)

    rc2 = rc.clone()
    assert rc.strong_count() == 2

    with pytest.raises(SharedReferenceError):
        rc.set(7)

    assert rc.value() == 100
    assert rc2.value() == 100


def test_set_allowed_again_after_other_handle_dropped():
    rc = Rc(1)
    other = rc.clone()
    other.drop()
    rc.set(2)
    assert rc.value() == 2


def test_deref():
    rc = Rc("hello")
    assert len(rc.value()) == 5


def test_double_drop_detected():
    rc = Rc("x")
    rc.drop()
    with pytest.raises(DoubleDropError):
        rc.drop()


def test_use_after_drop_raises():
    rc = Rc("x")
    keep = rc.clone()
    rc.drop()
    with pytest.raises(ReferenceError):
        rc.value()
    with pytest.raises(ReferenceError):
        rc.clone()
    assert keep.strong_count() == 1


def test_try_unwrap_success():
    rc = Rc("own me")
    assert rc.try_unwrap() == "own me"
    with pytest.raises(ReferenceError):
        rc.value()


def test_try_unwrap_fail_keeps_handle():
    rc = Rc("shared")
    clone = rc.clone()
    with pytest.raises(SharedReferenceError):
        rc.try_unwrap()
    assert rc.value() == "shared"
    assert clone.strong_count() == 2


def test_try_unwrap_inside_with_block():
    with Rc([1, 2]) as rc:
        value = rc.try_unwrap()
    assert value == [1, 2]