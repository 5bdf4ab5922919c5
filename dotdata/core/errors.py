"""
Exceptions raised when addressing nested data by path.
"""
from typing import Sequence

PATH_SEPARATOR_DISPLAY = " » "


def format_path(segments: Sequence[str]) -> str:
    """Join path segments for error messages, e.g. `a » b » c`."""
    return PATH_SEPARATOR_DISPLAY.join(segments)


class DataError(Exception):
    """Base class for all dotdata errors."""

    def __init__(self, message: str, path: Sequence[str] | None = None):
        super().__init__(message)
        self.path: tuple[str, ...] = tuple(path) if path else ()


class InvalidPathError(DataError, ValueError):
    """Raised when a path string is empty or contains empty segments."""
    pass


class PathBlockedError(DataError):
    """
    Raised when a walk would have to descend into a value that is not a
    container (e.g. a string sitting where a dict is expected).
    """

    def __init__(self, segment: str, path: Sequence[str]):
        self.segment = segment
        super().__init__(
            f'Key path "{segment}" within "{format_path(path)}" cannot be '
            "indexed into (is not a container)",
            path,
        )


class MissingPathError(DataError, LookupError):
    """Raised by `get` without a default when nothing exists at the path."""

    def __init__(self, path: Sequence[str]):
        super().__init__(
            f'No data exists at the given path: "{format_path(path)}"', path
        )


class NotRepresentableError(DataError, TypeError):
    """Raised when a sub-view is requested for a value that is not a container."""

    def __init__(self, path: Sequence[str]):
        super().__init__(
            f'Value at "{format_path(path)}" could not be represented as a Data',
            path,
        )
