"""Domain datatypes for the static service-resource hierarchy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

ROOT_ID = "root"


class Service(str, Enum):
    """Service categories a node can be tagged with."""

    STATIC_WEB_APP = "staticWebApp"


@dataclass(frozen=True)
class LeafNode:
    """Tree node without a children tuple."""

    id: str
    service: Service


@dataclass(frozen=True)
class InternalNode:
    """Tree node owning an ordered tuple of child nodes.

    ``sort_key`` optionally reorders children when they are queried; the stored
    tuple always keeps construction order.
    """

    id: str
    service: Service
    children: tuple["TreeNode", ...] = ()
    sort_key: Callable[["TreeNode"], object] | None = None

    def ordered_children(self) -> list["TreeNode"]:
        """Return children in presentation order."""
        if self.sort_key is None:
            return list(self.children)
        return sorted(self.children, key=self.sort_key)


TreeNode = InternalNode | LeafNode


def is_internal(node: TreeNode) -> bool:
    """Return whether ``node`` carries a children tuple (possibly empty)."""
    return isinstance(node, InternalNode)


__all__ = [
    "ROOT_ID",
    "Service",
    "LeafNode",
    "InternalNode",
    "TreeNode",
    "is_internal",
]
