"""Service-category to presenter dispatch table."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import UnknownServiceError
from ..tree_model.types import Service, TreeNode
from .base import ServicePresenter
from .static_web_app import DEFAULT_RESOLVE_DELAY_SECONDS, StaticWebAppPresenter
from .types import ResourceModel


class PresenterRegistry:
    """Map each service category to the presenter that renders it.

    Lookups of unregistered categories raise ``UnknownServiceError``: a node
    tagged with an unknown category means the tree and the registry were built
    inconsistently.
    """

    def __init__(self, presenters: Iterable[ServicePresenter] = ()) -> None:
        self._presenters: dict[Service, ServicePresenter] = {}
        for presenter in presenters:
            self.register(presenter)

    def register(self, presenter: ServicePresenter) -> None:
        """Register ``presenter`` for its category, replacing any previous one."""
        self._presenters[Service(presenter.service)] = presenter

    def get(self, service: Service | str) -> ServicePresenter:
        try:
            return self._presenters[Service(service)]
        except (KeyError, ValueError):
            raise UnknownServiceError(service) from None

    def services(self) -> list[Service]:
        return list(self._presenters)

    def __contains__(self, service: object) -> bool:
        try:
            return Service(service) in self._presenters
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._presenters)


def model_for_node(node: TreeNode) -> ResourceModel:
    """Derive the minimal presenter model for ``node``."""
    service_id = Service(node.service).value
    return ResourceModel(id=node.id, name=node.id, type=service_id, service_id=service_id)


def default_registry(resolve_delay: float = DEFAULT_RESOLVE_DELAY_SECONDS) -> PresenterRegistry:
    """Return a registry covering every built-in service category."""
    return PresenterRegistry([StaticWebAppPresenter(resolve_delay=resolve_delay)])


__all__ = [
    "PresenterRegistry",
    "default_registry",
    "model_for_node",
]
