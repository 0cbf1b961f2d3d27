"""Non-owning references that turn empty when their target goes away."""

from __future__ import annotations

import weakref
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Weak(Generic[T]):
    """A weak reference; two references are equal when they share a target."""

    __slots__ = ("_ref",)

    def __init__(self, target: T | None = None) -> None:
        if target is None:
            self._ref = None
        elif isinstance(target, EnableWeakFromThis):
            self._ref = target._control_block()
        else:
            self._ref = weakref.ref(target)

    def get(self) -> T | None:
        """Return the target, or ``None`` once it has been destroyed."""
        return self._ref() if self._ref is not None else None

    def valid(self) -> bool:
        return self.get() is not None

    def __bool__(self) -> bool:
        return self.valid()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Weak):
            return NotImplemented
        return self._ref is other._ref

    def __hash__(self) -> int:
        return id(self._ref)

    def __repr__(self) -> str:
        return f"Weak({self.get()!r})"


class EnableWeakFromThis:
    """Mixin giving instances a :meth:`weak` method."""

    def _control_block(self) -> Any:
        block = self.__dict__.get("_weak_control_block")
        if block is None:
            block = weakref.ref(self)
            self.__dict__["_weak_control_block"] = block
        return block

    def weak(self) -> Weak:
        """Return a weak reference to this instance."""
        return Weak(self)