"""Path helpers."""

from __future__ import annotations

import sys

_PARENT = "/../"


def get_executable_path() -> str:
    """Return the directory of the running executable, with trailing separator.

    Only Windows reports a directory; other platforms give an empty string.
    """
    if sys.platform != "win32":
        return ""
    executable = sys.executable
    if not executable:
        return ""
    cut = max(executable.rfind("\\"), executable.rfind("/"))
    return executable[: cut + 1]


def collapse(filename: str) -> str:
    """Resolve ``/../`` segments in ``filename`` textually."""
    result: list[str] = []
    skip_first_slash = False
    i = 0
    while i < len(filename):
        if filename.startswith(_PARENT, i):
            while result and result[-1] != "/":
                result.pop()
            if result:
                result.pop()
            else:
                skip_first_slash = True
            i += len(_PARENT) - 1
        else:
            char = filename[i]
            if skip_first_slash and char == "/":
                skip_first_slash = False
            else:
                result.append(char)
            i += 1
    return "".join(result)