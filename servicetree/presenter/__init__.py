"""Per-service presenters and the registry that dispatches to them.

Defines ``DisplayItem`` plus the ``ServicePresenter`` contract.
Also ships the ``staticWebApp`` presenter used by the sample tree.
"""

from __future__ import annotations

from .base import ServicePresenter
from .registry import PresenterRegistry, default_registry, model_for_node
from .static_web_app import DEFAULT_RESOLVE_DELAY_SECONDS, ResolvedStaticWebAppModel, StaticWebAppPresenter
from .types import CollapsibleState, DisplayItem, ResourceModel

__all__ = [
    "CollapsibleState",
    "DisplayItem",
    "ResourceModel",
    "ServicePresenter",
    "PresenterRegistry",
    "default_registry",
    "model_for_node",
    "DEFAULT_RESOLVE_DELAY_SECONDS",
    "ResolvedStaticWebAppModel",
    "StaticWebAppPresenter",
]
