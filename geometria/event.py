"""Multicast events with listeners that detach when they go away."""

from __future__ import annotations

import weakref
from typing import Any, Callable


class _EventCore:
    """Callback storage shared by every copy of one event."""

    def __init__(self) -> None:
        self._callbacks: dict[int, Callable[..., Any]] = {}
        self._erased: list[int] = []
        self._next_id = 0

    def attach(self, callback: Callable[..., Any]) -> int:
        self._remove_erased()
        self._next_id += 1
        self._callbacks[self._next_id] = callback
        return self._next_id

    def remove(self, listener_id: int) -> None:
        # Removal is deferred so that a callback may detach during dispatch.
        self._erased.append(listener_id)

    def fire(self, *args: Any) -> None:
        self._remove_erased()
        for callback in list(self._callbacks.values()):
            callback(*args)

    def count(self) -> int:
        self._remove_erased()
        return len(self._callbacks)

    def _remove_erased(self) -> None:
        for listener_id in self._erased:
            self._callbacks.pop(listener_id, None)
        self._erased.clear()


class Listener:
    """Handle for an attached callback.

    The callback stays attached while the handle is alive; dropping the handle
    or calling :meth:`detach` removes it. The handle holds the event weakly.
    """

    def __init__(self, core: _EventCore, listener_id: int) -> None:
        self._core: weakref.ref[_EventCore] | None = weakref.ref(core)
        self._id = listener_id

    def detach(self) -> None:
        """Remove the callback from its event; further calls do nothing."""
        if not self._id:
            return
        core = self._core() if self._core is not None else None
        if core is not None:
            core.remove(self._id)
        self._core = None
        self._id = 0

    def __enter__(self) -> Listener:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    def __del__(self) -> None:
        self.detach()


class Event:
    """An event that calls every attached callback with the arguments it is fired with."""

    def __init__(self) -> None:
        self._core = _EventCore()

    def attach(self, callback: Callable[..., Any], instance: Any = None) -> Listener:
        """Attach ``callback`` and return the listener keeping it attached.

        With ``instance``, the callback is called as ``callback(instance, *args)``,
        which suits unbound methods or callables taking user data.
        """
        if instance is None:
            return Listener(self._core, self._core.attach(callback))

        def bound(*args: Any) -> None:
            callback(instance, *args)

        return Listener(self._core, self._core.attach(bound))

    def __call__(self, *args: Any) -> None:
        self._core.fire(*args)

    def listeners_count(self) -> int:
        """Number of callbacks currently attached."""
        return self._core.count()

    def copy(self) -> Event:
        """Return an event sharing the same callbacks as this one."""
        other = Event.__new__(Event)
        other._core = self._core
        return other

    __copy__ = copy