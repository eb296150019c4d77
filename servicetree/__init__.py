"""Public package surface for servicetree.

Exports the provider, store, and registry needed to serve a sidebar tree view.
``main`` is imported lazily to keep package imports lightweight.
"""

from __future__ import annotations

from .errors import InvalidTreeError, ResolveError, ServiceTreeError, UnknownServiceError
from .events import EventEmitter
from .presenter import CollapsibleState, DisplayItem, PresenterRegistry, ServicePresenter, default_registry
from .provider import ResolvedModelCache, ServiceTreeDataProvider
from .tree_model import InternalNode, LeafNode, Service, TreeNode, TreeStore, build_sample_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "ServiceTreeError",
    "UnknownServiceError",
    "InvalidTreeError",
    "ResolveError",
    "EventEmitter",
    "CollapsibleState",
    "DisplayItem",
    "PresenterRegistry",
    "ServicePresenter",
    "default_registry",
    "ResolvedModelCache",
    "ServiceTreeDataProvider",
    "InternalNode",
    "LeafNode",
    "Service",
    "TreeNode",
    "TreeStore",
    "build_sample_tree",
]
