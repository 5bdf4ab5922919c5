"""
Parse "dot paths" such as `a.b.c` or `a/b/c` into key segments.
"""
from typing import Any

from dotdata.core.errors import InvalidPathError

DELIMITERS = (".", "/")


def parse_path(path: Any) -> tuple[str, ...]:
    """
    Split a path string into its segments. Either `.` or `/` separates keys;
    slashes are normalised to dots first, so both spellings address the same
    node.
    """
    if not isinstance(path, str):
        raise InvalidPathError(f"Path must be a string, got {type(path).__name__}")
    if path == "":
        raise InvalidPathError("Path cannot be an empty string")

    normalised = path
    for delimiter in DELIMITERS[1:]:
        normalised = normalised.replace(delimiter, DELIMITERS[0])
    segments = tuple(normalised.split(DELIMITERS[0]))

    if any(s == "" for s in segments):
        raise InvalidPathError(f"Path segments cannot be empty: {path!r}", segments)
    return segments
