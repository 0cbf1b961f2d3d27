"""Subjects that notify weakly held observers."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from .weak import Weak

T = TypeVar("T")


class Observable(Generic[T]):
    """Keeps weak references to observers; destroyed ones are dropped on notify."""

    def __init__(self) -> None:
        self._observers: list[Weak[T]] = []

    def add_observer(self, observer: T) -> None:
        self._observers.append(Weak(observer))

    def remove_observer(self, observer: T) -> None:
        """Remove every registration of ``observer``."""
        ref = Weak(observer)
        self._observers = [w for w in self._observers if w != ref]

    def _notify(self, callback: Callable[[T], Any]) -> None:
        for ref in list(self._observers):
            target = ref.get()
            if target is not None:
                callback(target)
        self._observers = [w for w in self._observers if w.valid()]