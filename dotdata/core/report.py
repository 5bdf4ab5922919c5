"""
Structured descriptions of the node found at a path.
"""
from pydantic import BaseModel, Field, computed_field

from dotdata.core.data import Data
from dotdata.core.keypath import parse_path
from dotdata.core.nodes import NodeKind, kind_of, node_size


class NodeInfo(BaseModel):
    """What lives at a path inside a Data tree."""

    path: str
    segments: list[str] = Field(default_factory=list)
    exists: bool = False
    kind: NodeKind | None = None
    size: int | None = None  # children of a container/sequence
    keys: list[str] | None = None  # only for containers

    @computed_field
    def depth(self) -> int:
        """Number of segments from the root."""
        return len(self.segments)


def describe(data: Data, path: str) -> NodeInfo:
    """Build a NodeInfo for the value at path. Never raises for missing data."""
    segments = list(parse_path(path))
    if not data.has(path):
        return NodeInfo(path=path, segments=segments)

    value = data.get(path)
    kind = kind_of(value)
    return NodeInfo(
        path=path,
        segments=segments,
        exists=True,
        kind=kind,
        size=node_size(value),
        keys=[str(k) for k in value] if kind is NodeKind.CONTAINER else None,
    )
