"""Rendering context that tells listeners about size changes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .observable import Observable


class ContextListener(ABC):
    """Observer told when the context is resized."""

    @abstractmethod
    def on_resize(self, width: int, height: int) -> None:
        ...


class Context(Observable[ContextListener]):
    """A drawing surface with a size."""

    def __init__(self) -> None:
        super().__init__()
        self._width = 0
        self._height = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _on_resize(self, width: int, height: int) -> None:
        self._notify(lambda listener: listener.on_resize(width, height))


class ResizableContext(Context):
    """A context whose size is set by its owner, e.g. a window's framebuffer."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self._width = width
        self._height = height

    def resize(self, width: int, height: int) -> None:
        """Notify listeners, then take the new size; nothing happens if unchanged.

        Listeners still see the old size on the context while being notified.
        """
        if width != self._width or height != self._height:
            self._on_resize(width, height)
            self._width = width
            self._height = height