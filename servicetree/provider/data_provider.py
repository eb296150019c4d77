"""UI-facing tree data provider composing store, presenters, and cache.

The provider answers the three queries a sidebar view issues (item, children,
parent) and drives the two-phase reveal: ``get_tree_item`` returns the cheap
placeholder at once, ``resolve_tree_item`` fetches the richer model, caches it
and fires a change event so the view re-queries the node.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import replace

from ..config import ProviderConfig
from ..errors import ResolveError
from ..events import EventEmitter
from ..presenter.registry import PresenterRegistry, model_for_node
from ..presenter.types import CollapsibleState, DisplayItem
from ..tree_model.store import TreeStore
from ..tree_model.types import InternalNode, TreeNode, is_internal
from .cache import ResolvedModelCache

logger = logging.getLogger(__name__)

VIEW_ID = "serviceTree"
RESOLVE_FAILED_PREFIX = "failed to resolve: "

NodeRef = TreeNode | str


def _node_id(node: NodeRef) -> str:
    return node if isinstance(node, str) else node.id


class ServiceTreeDataProvider:
    """Serve display items, children, and parents for one ``TreeStore``."""

    view_id = VIEW_ID

    def __init__(
        self,
        store: TreeStore,
        registry: PresenterRegistry,
        *,
        cache: ResolvedModelCache | None = None,
        config: ProviderConfig | None = None,
    ) -> None:
        self._store = store
        self._registry = registry
        self._cache = cache if cache is not None else ResolvedModelCache()
        self._config = config if config is not None else ProviderConfig()
        self._on_did_change_tree_data: EventEmitter[TreeNode | None] = EventEmitter()

    @property
    def store(self) -> TreeStore:
        return self._store

    @property
    def cache(self) -> ResolvedModelCache:
        return self._cache

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def on_did_change_tree_data(self) -> EventEmitter[TreeNode | None]:
        """Emitter fired with the changed node, or ``None`` for everything."""
        return self._on_did_change_tree_data

    def get_tree_item(self, node: TreeNode) -> DisplayItem:
        """Build the display item for ``node``.

        Raises ``UnknownServiceError`` when ``node.service`` has no presenter.
        """
        presenter = self._registry.get(node.service)
        resolved = self._cache.get(node.id)
        if resolved is not None:
            item = presenter.create_resolved_tree_item(resolved)
        else:
            item = presenter.create_tree_item(model_for_node(node))
            failure = self._cache.failure(node.id)
            if failure is not None:
                item = replace(item, description=f"{RESOLVE_FAILED_PREFIX}{failure.reason}")
        state = CollapsibleState.COLLAPSED if is_internal(node) else CollapsibleState.NONE
        return item.with_state(state, item_id=node.id)

    def get_children(self, node: NodeRef | None = None) -> list[TreeNode]:
        if node is None:
            return self._store.get_children()
        return self._store.get_children(_node_id(node))

    def get_parent(self, node: NodeRef) -> InternalNode | None:
        return self._store.get_parent(_node_id(node))

    async def resolve_tree_item(self, node: TreeNode) -> DisplayItem:
        """Resolve ``node`` once and return its resolved display item.

        Failures are not raised: they are recorded against the node, a change
        event fires, and the placeholder item carrying the failure reason is
        returned. The next call retries. A result that arrives after the node
        was refreshed is discarded without firing.
        """
        presenter = self._registry.get(node.service)
        if node.id in self._cache:
            return self.get_tree_item(node)

        generation = self._cache.generation(node.id)
        timeout = self._config.resolve_timeout_seconds
        try:
            resolving = presenter.resolve_model(model_for_node(node))
            if timeout is not None:
                resolved = await asyncio.wait_for(resolving, timeout)
            else:
                resolved = await resolving
        except asyncio.TimeoutError:
            reason = f"timed out after {timeout:g}s" if timeout is not None else "timed out"
            error: ResolveError | None = ResolveError(node.id, reason)
        except Exception as exc:
            error = ResolveError(node.id, str(exc) or type(exc).__name__)
        else:
            error = None

        if self._cache.generation(node.id) != generation:
            logger.debug("discarding stale resolve of %s", node.id)
            return self.get_tree_item(node)
        if error is not None:
            logger.warning("%s", error)
            self._cache.record_failure(node.id, error)
        else:
            self._cache.store(node.id, resolved)
            logger.debug("resolved %s", node.id)
        self._on_did_change_tree_data.fire(node)
        return self.get_tree_item(node)

    async def resolve_all(self, nodes: Iterable[TreeNode] | None = None) -> list[DisplayItem]:
        """Resolve ``nodes`` (every node in the store by default) concurrently."""
        targets = list(self._store.iter_nodes() if nodes is None else nodes)
        return list(await asyncio.gather(*(self.resolve_tree_item(node) for node in targets)))

    async def refresh(self, node: TreeNode | None = None) -> None:
        """Refresh one node's resolved data, or drop all cached data.

        With a node whose presenter supports refresh and whose model is cached,
        the cached model is refreshed in place; otherwise its entry is dropped
        so the next resolve fetches it again.
        """
        if node is None:
            self._cache.clear()
            logger.debug("refreshing entire tree")
            self._on_did_change_tree_data.fire(None)
            return

        presenter = self._registry.get(node.service)
        resolved = self._cache.get(node.id)
        if resolved is not None and presenter.has_refresh:
            self._cache.mark_stale(node.id)
            await presenter.refresh(resolved)
        else:
            self._cache.invalidate(node.id)
        self._on_did_change_tree_data.fire(node)


__all__ = [
    "VIEW_ID",
    "RESOLVE_FAILED_PREFIX",
    "ServiceTreeDataProvider",
]
