"""Domain model for the static service-resource tree.

This package contains non-UI tree primitives:
- internal/leaf node datatypes tagged with a service category
- a read-only store answering children/parent lookups
- the hand-authored sample hierarchy
"""

from __future__ import annotations

from .sample import build_sample_tree
from .store import TreeStore, walk
from .types import ROOT_ID, InternalNode, LeafNode, Service, TreeNode, is_internal

__all__ = [
    "ROOT_ID",
    "Service",
    "InternalNode",
    "LeafNode",
    "TreeNode",
    "is_internal",
    "TreeStore",
    "walk",
    "build_sample_tree",
]
