"""Per-node store of resolved models and last resolve failures."""

from __future__ import annotations

from ..errors import ResolveError
from ..presenter.types import ResourceModel


class ResolvedModelCache:
    """Resolved models keyed by node id.

    An id holds either a resolved model or the error from its latest failed
    resolve, never both. ``generation`` changes whenever an id is invalidated
    or the cache is cleared, so a resolve that started earlier can tell its
    result is stale.
    """

    def __init__(self) -> None:
        self._resolved: dict[str, ResourceModel] = {}
        self._failures: dict[str, ResolveError] = {}
        self._generations: dict[str, int] = {}
        self._epoch = 0

    def generation(self, node_id: str) -> tuple[int, int]:
        return self._epoch, self._generations.get(node_id, 0)

    def get(self, node_id: str) -> ResourceModel | None:
        return self._resolved.get(node_id)

    def failure(self, node_id: str) -> ResolveError | None:
        return self._failures.get(node_id)

    def store(self, node_id: str, model: ResourceModel) -> None:
        self._failures.pop(node_id, None)
        self._resolved[node_id] = model

    def record_failure(self, node_id: str, error: ResolveError) -> None:
        self._resolved.pop(node_id, None)
        self._failures[node_id] = error

    def mark_stale(self, node_id: str) -> None:
        """Advance the generation of ``node_id`` without dropping its entry."""
        self._generations[node_id] = self._generations.get(node_id, 0) + 1

    def invalidate(self, node_id: str) -> bool:
        """Forget ``node_id``; return whether anything was cached for it."""
        self.mark_stale(node_id)
        had_model = self._resolved.pop(node_id, None) is not None
        had_failure = self._failures.pop(node_id, None) is not None
        return had_model or had_failure

    def clear(self) -> None:
        self._epoch += 1
        self._generations.clear()
        self._resolved.clear()
        self._failures.clear()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._resolved

    def __len__(self) -> int:
        return len(self._resolved)


__all__ = ["ResolvedModelCache"]
