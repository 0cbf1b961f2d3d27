"""Debugging helpers."""

from __future__ import annotations

import traceback


def print_stacktrace() -> None:
    """Print the current call stack, innermost frame first.

    Each line is ``<depth>: <function> - <file>:<line>``; the outermost frame
    has depth 0.
    """
    stack = traceback.extract_stack()
    for depth in range(len(stack) - 1, -1, -1):
        frame = stack[depth]
        print(f"{depth}: {frame.name} - {frame.filename}:{frame.lineno}")