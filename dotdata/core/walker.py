"""
Helpers to navigate and manipulate nested dicts via "dot paths".

All functions take the raw root dict and a path string; `Data` in
`dotdata.core.data` is a thin object wrapper around them.
"""
import copy
from enum import Enum
import logging
from typing import Any, Mapping, Sequence

from dotdata.core.errors import MissingPathError, PathBlockedError
from dotdata.core.keypath import parse_path
from dotdata.core.nodes import NodeKind, kind_of

logger = logging.getLogger("dotdata.walker")

# Distinguishes "no default given" from a default of None
_MISSING: Any = object()


class ImportMode(str, Enum):
    """How `merge_into` resolves a key present on both sides."""
    REPLACE = "replace"    # source wins on leaf conflicts
    PRESERVE = "preserve"  # existing value wins, only missing keys are filled
    MERGE = "merge"        # like REPLACE, but sequences are concatenated


def locate(root: dict, segments: Sequence[str], *, create: bool = False) -> tuple[dict, str]:
    """
    Walk every segment but the last, returning (parent container, last key).

    With `create=True` missing intermediates (or ones holding None) are
    replaced by empty dicts. Otherwise a missing intermediate raises
    MissingPathError. An intermediate holding anything other than a dict
    always raises PathBlockedError.
    """
    current = root
    for depth, key in enumerate(segments[:-1]):
        if key not in current or (create and current[key] is None):
            if not create:
                raise MissingPathError(segments)
            logger.debug("Creating container at %s", ".".join(segments[:depth + 1]))
            current[key] = {}
        elif not kind_of(current[key]).is_container:
            raise PathBlockedError(key, segments)
        current = current[key]
    return current, segments[-1]


def get_by_path(d: dict, path: str, default: Any = _MISSING) -> Any:
    """
    Get a value from a nested dict via a dot-separated path.

    If anything along the path is missing (or blocked by a non-container),
    `default` is returned when one was passed, even a falsy one. Without a
    default the error propagates.
    """
    segments = parse_path(path)
    try:
        parent, key = locate(d, segments)
        if key not in parent:
            raise MissingPathError(segments)
    except (MissingPathError, PathBlockedError):
        if default is _MISSING:
            raise
        return default
    return parent[key]


def has_path(d: dict, path: str) -> bool:
    """True if every intermediate is a dict and the final key exists."""
    segments = parse_path(path)
    try:
        parent, key = locate(d, segments)
    except (MissingPathError, PathBlockedError):
        return False
    return key in parent


def set_by_path(d: dict, path: str, value: Any) -> None:
    """Set a value in a nested dict via a dot-separated path."""
    parent, key = locate(d, parse_path(path), create=True)
    parent[key] = value


def append_by_path(d: dict, path: str, value: Any) -> None:
    """
    Append a value to the sequence at path, creating it if needed.

    A missing or None value starts a new list. A tuple is replaced by a
    list; any other existing value (leaf or dict) is promoted to
    `[existing, value]`.
    """
    segments = parse_path(path)
    parent, key = locate(d, segments, create=True)
    if key not in parent or parent[key] is None:
        parent[key] = [value]
        return

    existing = parent[key]
    if isinstance(existing, list):
        existing.append(value)
    elif kind_of(existing) is NodeKind.SEQUENCE:
        parent[key] = [*existing, value]
    else:
        logger.debug("Promoting %s value at %s to a list", kind_of(existing).value, path)
        parent[key] = [existing, value]


def delete_by_path(d: dict, path: str) -> None:
    """Delete a key in a nested dict via a dot-separated path."""
    segments = parse_path(path)
    try:
        parent, key = locate(d, segments)
    except (MissingPathError, PathBlockedError):
        logger.debug("Nothing to remove at %s", path)
        return  # Key path does not exist; nothing to delete
    parent.pop(key, None)


def merge_into(target: dict, source: Mapping, mode: ImportMode = ImportMode.REPLACE) -> dict:
    """
    Deep-merge `source` into `target` in place and return `target`.
    Values taken from `source` are deep-copied so `target` never aliases it.
    """
    mode = ImportMode(mode)
    for key, value in source.items():
        if key not in target:
            target[key] = copy.deepcopy(value)
            continue

        existing = target[key]
        if kind_of(existing).is_container and kind_of(value).is_container:
            merge_into(existing, value, mode)
        elif mode is ImportMode.PRESERVE:
            continue
        elif (mode is ImportMode.MERGE
              and kind_of(existing) is NodeKind.SEQUENCE
              and kind_of(value) is NodeKind.SEQUENCE):
            target[key] = [*existing, *copy.deepcopy(value)]
        else:
            target[key] = copy.deepcopy(value)
    return target
