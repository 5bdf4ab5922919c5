"""
The `Data` accessor: path-addressed reads and writes over a nested dict.
"""
import copy
from typing import Any, Iterator, Mapping

from dotdata.core import walker
from dotdata.core.errors import NotRepresentableError
from dotdata.core.keypath import parse_path
from dotdata.core.nodes import kind_of
from dotdata.core.walker import ImportMode, _MISSING


class Data:
    """
    Wraps a nested dict and addresses it with paths like `a.b.c` or `a/b/c`.

    The given dict is adopted, not copied: writes through this object are
    visible to whoever else holds the dict, and sub-views from `get_data`
    share storage with their parent. There is no internal locking; callers
    sharing one instance across threads must serialise access themselves.

    Index sugar maps onto the path operations:
    `data["a.b"]` reads (None when missing), `data["a.b"] = v` sets,
    `del data["a.b"]` removes and `"a.b" in data` checks existence.
    """

    def __init__(self, data: dict | None = None):
        if data is None:
            data = {}
        if not kind_of(data).is_container:
            raise TypeError(f"Data expects a dict, got {type(data).__name__}")
        self._data: dict[str, Any] = data

    # --- Path operations ---

    def get(self, path: str, default: Any = _MISSING) -> Any:
        """
        Return the value at path. When nothing is there, return `default` if
        one was given (None and False included), otherwise raise.
        """
        return walker.get_by_path(self._data, path, default)

    def has(self, path: str) -> bool:
        """Whether a value exists at path."""
        return walker.has_path(self._data, path)

    def set(self, path: str, value: Any) -> None:
        """Set the value at path, creating intermediate dicts as needed."""
        walker.set_by_path(self._data, path, value)

    def append(self, path: str, value: Any) -> None:
        """Append value to the list at path, creating or promoting it."""
        walker.append_by_path(self._data, path, value)

    def remove(self, path: str) -> None:
        """Remove the value at path. Missing paths are ignored."""
        walker.delete_by_path(self._data, path)

    def get_data(self, path: str) -> "Data":
        """
        Return a sub-view over the dict at path. The sub-view shares storage
        with this object rather than copying it.
        """
        value = self.get(path)
        if not kind_of(value).is_container:
            raise NotRepresentableError(parse_path(path))
        return Data(value)

    # --- Bulk operations ---

    def import_(self, data: Mapping, mode: ImportMode = ImportMode.REPLACE) -> None:
        """Deep-merge a raw nested dict into this one (see ImportMode)."""
        if not kind_of(data).is_container:
            raise TypeError(f"Can only import a dict, got {type(data).__name__}")
        walker.merge_into(self._data, data, mode)

    def import_data(self, other: "Data", mode: ImportMode = ImportMode.REPLACE) -> None:
        """Deep-merge another Data object's contents into this one."""
        self.import_(other.export(), mode)

    def export(self, deep: bool = False) -> dict[str, Any]:
        """
        The underlying dict. This is the live tree unless `deep=True`, in
        which case an independent copy is returned.
        """
        return copy.deepcopy(self._data) if deep else self._data

    # --- Index sugar ---

    def __getitem__(self, path: str) -> Any:
        return self.get(path, None)

    def __setitem__(self, path: str, value: Any) -> None:
        self.set(path, value)

    def __delitem__(self, path: str) -> None:
        self.remove(path)

    def __contains__(self, path: str) -> bool:
        return self.has(path)

    # --- Misc dunders ---

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Data):
            return self._data == other._data
        if isinstance(other, dict):
            return self._data == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Data({self._data!r})"
