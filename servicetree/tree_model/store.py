"""Read-only store answering lookups over one static node hierarchy.

Every query walks the whole tree from the root because callers pass bare ids
without a location hint. Misses return ``[]`` or ``None`` rather than raising:
UI widgets may ask about stale ids while a view is being refreshed.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..errors import InvalidTreeError
from .types import ROOT_ID, InternalNode, TreeNode


def walk(
    node: TreeNode,
    parent: InternalNode | None = None,
    depth: int = 0,
) -> Iterator[tuple[TreeNode, InternalNode | None, int]]:
    """Yield ``(node, parent, depth)`` in pre-order, depth-first.

    Consumers short-circuit by stopping iteration at their first match.
    """
    yield node, parent, depth
    if isinstance(node, InternalNode):
        for child in node.children:
            yield from walk(child, node, depth + 1)


class TreeStore:
    """Own one node graph and answer children/parent/node lookups."""

    def __init__(self, root: InternalNode) -> None:
        self._root = root

    @property
    def root(self) -> InternalNode:
        return self._root

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Yield every node in pre-order."""
        for node, _parent, _depth in walk(self._root):
            yield node

    def find_node(self, node_id: str) -> TreeNode | None:
        """Return the first node whose id is ``node_id``."""
        for node, _parent, _depth in walk(self._root):
            if node.id == node_id:
                return node
        return None

    def get_children(self, node_id: str | None = None) -> list[TreeNode]:
        """Return the children of ``node_id`` (root when omitted).

        Leaves and unknown ids both yield an empty list.
        """
        if node_id is None:
            return self._root.ordered_children()
        node = self.find_node(node_id)
        if not isinstance(node, InternalNode):
            return []
        return node.ordered_children()

    def get_parent(self, node_id: str) -> InternalNode | None:
        """Return the internal node whose children contain ``node_id``."""
        if node_id == ROOT_ID:
            return None
        for node, parent, _depth in walk(self._root):
            if node.id == node_id:
                return parent
        return None

    def depth_of(self, node_id: str) -> int | None:
        """Return the distance from the root to ``node_id``."""
        for node, _parent, depth in walk(self._root):
            if node.id == node_id:
                return depth
        return None

    def validate(self) -> None:
        """Raise ``InvalidTreeError`` unless ids are unique and the root is ``root``."""
        if self._root.id != ROOT_ID:
            raise InvalidTreeError(f"root node must have id {ROOT_ID!r}, got {self._root.id!r}")
        seen: set[str] = set()
        for node in self.iter_nodes():
            if node.id in seen:
                raise InvalidTreeError(f"node id {node.id!r} appears more than once")
            seen.add(node.id)


__all__ = [
    "TreeStore",
    "walk",
]
