from geometria.observable import Observable
from geometria.weak import EnableWeakFromThis


class Listener(EnableWeakFromThis):
    def __init__(self, journal):
        self.journal = journal

    def foo(self):
        self.journal.append("foo")

    def bar(self):
        self.journal.append("bar")


class A(Observable):
    def foo(self):
        self._notify(lambda x: x.foo())

    def bar(self):
        self._notify(lambda x: x.bar())


def test_call_once():
    journal = []
    listener = Listener(journal)
    ref = listener.weak()
    a = A()
    Observable.add_observer(a, listener)
    a.foo()
    assert ref.get() is listener
    assert journal == ["foo"]


def test_call_multiple_times():
    journal = []
    listener = Listener(journal)
    ref = listener.weak()
    a = A()
    Observable.add_observer(a, listener)
    for _ in range(7):
        a.foo()
    assert ref.get() is listener
    assert journal == ["foo"] * 7


def test_call_different_methods():
    journal = []
    listener = Listener(journal)
    ref = listener.weak()
    a = A()
    Observable.add_observer(a, listener)
    a.foo()
    a.bar()
    assert ref.get() is listener
    assert journal == ["foo", "bar"]


def test_destroyed_listener():
    journal = []
    a = A()
    listener = Listener(journal)
    ref = listener.weak()
    Observable.add_observer(a, listener)
    del listener
    a.foo()
    assert ref.get() is None
    assert journal == []


def test_moved_listener():
    journal = []
    a = A()
    listener = Listener(journal)
    Observable.add_observer(a, listener)
    actual = listener
    del listener
    a.foo()
    assert journal == ["foo"]
    assert actual.journal is journal


def test_remove_observer():
    journal = []
    a = A()
    listener = Listener(journal)
    ref = listener.weak()
    Observable.add_observer(a, listener)
    a.foo()
    assert journal == ["foo"]
    Observable.remove_observer(a, listener)
    a.foo()
    assert ref.get() is listener
    assert journal == ["foo"]


def test_remove_observer_removes_all_registrations():
    journal = []
    a = A()
    listener = Listener(journal)
    ref = listener.weak()
    Observable.add_observer(a, listener)
    Observable.add_observer(a, listener)
    a.foo()
    assert journal == ["foo", "foo"]
    Observable.remove_observer(a, listener)
    a.foo()
    assert ref.get() is listener
    assert journal == ["foo", "foo"]


def test_multiple_observers_notified_in_order():
    journal = []

    class Named(EnableWeakFromThis):
        def __init__(self, name):
            self.name = name

        def foo(self):
            journal.append(self.name)

        def bar(self):
            journal.append(self.name)

    first, second = Named("first"), Named("second")
    first_ref, second_ref = first.weak(), second.weak()
    a = A()
    Observable.add_observer(a, first)
    Observable.add_observer(a, second)
    a.foo()
    assert first_ref.get() is first
    assert second_ref.get() is second
    assert journal == ["first", "second"]