"""
Classifies stored values so the walker never has to guess at their shape.
"""
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """What a value in the tree is, as far as path walking is concerned."""
    CONTAINER = "container"  # dict: a path segment can descend into it
    SEQUENCE = "sequence"    # list/tuple: target of append, opaque to paths
    LEAF = "leaf"            # everything else

    @property
    def is_container(self) -> bool:
        """Can a path segment descend into this node?"""
        return self is NodeKind.CONTAINER


def kind_of(value: Any) -> NodeKind:
    """Tag a value with its NodeKind."""
    if isinstance(value, dict):
        return NodeKind.CONTAINER
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.LEAF


def node_size(value: Any) -> int | None:
    """Number of children for containers and sequences, None for leaves."""
    if kind_of(value) is NodeKind.LEAF:
        return None
    return len(value)
