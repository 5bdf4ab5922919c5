"""
dotdata: path-addressed access into nested dicts.

    >>> from dotdata import Data
    >>> d = Data({"a": {"b": 1}})
    >>> d.get("a.b") == d.get("a/b") == 1
    True
"""
from importlib.metadata import version, PackageNotFoundError

from dotdata.core.data import Data
from dotdata.core.errors import (
    DataError,
    InvalidPathError,
    MissingPathError,
    NotRepresentableError,
    PathBlockedError,
)
from dotdata.core.keypath import parse_path
from dotdata.core.nodes import NodeKind, kind_of
from dotdata.core.walker import ImportMode

try:
    __version__ = version("dotdata")
except PackageNotFoundError:
    __version__ = "unknown"
__app_name__ = "dotdata"

__all__ = [
    "Data",
    "DataError",
    "ImportMode",
    "InvalidPathError",
    "MissingPathError",
    "NodeKind",
    "NotRepresentableError",
    "PathBlockedError",
    "kind_of",
    "parse_path",
]
