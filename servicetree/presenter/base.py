"""Abstract presenter contract implemented once per service category."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..tree_model.types import Service
from .types import DisplayItem, ResourceModel

ResolvedT = TypeVar("ResolvedT", bound=ResourceModel)


class ServicePresenter(ABC, Generic[ResolvedT]):
    """Turn models of one service category into display items.

    ``create_tree_item`` renders the cheap placeholder shown immediately;
    ``resolve_model`` fetches the richer model that ``create_resolved_tree_item``
    renders once available. ``refresh`` mutates a resolved model in place and is
    optional: overriding it is what makes ``has_refresh`` true.
    """

    service: Service

    @property
    def has_refresh(self) -> bool:
        return type(self).refresh is not ServicePresenter.refresh

    @abstractmethod
    def create_tree_item(self, model: ResourceModel) -> DisplayItem:
        """Return the placeholder item for an unresolved model."""

    @abstractmethod
    async def resolve_model(self, model: ResourceModel) -> ResolvedT:
        """Fetch category-specific data for ``model``."""

    @abstractmethod
    def create_resolved_tree_item(self, model: ResolvedT) -> DisplayItem:
        """Return the item for a resolved model."""

    async def refresh(self, model: ResolvedT) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not support refresh")


__all__ = [
    "ServicePresenter",
]
