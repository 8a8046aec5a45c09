import pytest

from cokit.uniqueptr import UniquePtr, make_unique


class Resource:
    def __init__(self, name="res"):
        self.name = name
        self.closed = False

    def close(self):
        self.closed = True


class Animal:
    def __init__(self):
        self.name = "animal"


class Cat(Animal):
    def speak(self):
        self.name = "cat"
        return self.name


class Dog(Animal):
    def speak(self):
        self.name = "dog"
        return self.name


def test_make_unique_and_forwarding():
    animals = [make_unique(Cat), make_unique(Dog)]
    assert [p.speak() for p in animals] == ["cat", "dog"]
    assert animals[0].get().name == "cat"


def test_make_unique_passes_arguments():
    ptr = make_unique(Resource, name="db")
    assert ptr.get().name == "db"


def test_empty_pointer_is_false():
    ptr = UniquePtr()
    assert not ptr
    assert ptr.get() is None


def test_reset_calls_deleter():
    deleted = []
    first, second = object(), object()
    ptr = UniquePtr(first, deleted.append)
    ptr.reset(second)
    assert deleted == [first]
    assert ptr.get() is second
    ptr.reset()
    assert deleted == [first, second]
    assert not ptr


def test_release_does_not_delete():
    deleted = []
    obj = object()
    ptr = UniquePtr(obj, deleted.append)
    assert ptr.release() is obj
    assert deleted == []
    assert not ptr


def test_default_deleter_closes():
    res = Resource()
    ptr = UniquePtr(res)
    ptr.reset()
    assert res.closed


def test_context_manager_deletes_on_exit():
    res = Resource()
    with UniquePtr(res) as ptr:
        assert ptr.get() is res
        assert not res.closed
    assert res.closed
    assert not ptr


def test_swap_exchanges_objects_and_deleters():
    log_a, log_b = [], []
    a_obj, b_obj = object(), object()
    a = UniquePtr(a_obj, log_a.append)
    b = UniquePtr(b_obj, log_b.append)
    a.swap(b)
    assert a.get() is b_obj
    assert b.get() is a_obj
    assert a.get_deleter() == log_b.append
    a.reset()
    assert log_b == [b_obj]
    assert log_a == []


def test_take_moves_ownership():
    deleted = []
    obj = object()
    src = UniquePtr(obj, deleted.append)
    dst = src.take()
    assert not src
    assert dst.get() is obj
    dst.reset()
    assert deleted == [obj]


def test_equality_by_identity():
    obj = object()
    a = UniquePtr(obj)
    b = UniquePtr(obj)
    assert a == b
    assert UniquePtr() == UniquePtr()
    assert UniquePtr(object()) != a


def test_forwarding_on_empty_raises():
    with pytest.raises(AttributeError):
        UniquePtr().speak()