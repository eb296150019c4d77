"""Presenter for the ``staticWebApp`` service category.

Resolution is simulated: it sleeps for ``resolve_delay`` seconds and returns a
fixed repository.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ..tree_model.types import Service
from .base import ServicePresenter
from .types import DisplayItem, ResourceModel

logger = logging.getLogger(__name__)

DEFAULT_RESOLVE_DELAY_SECONDS = 0.8
SAMPLE_REPOSITORY_URL = "https://github.com/alexweininger/react-basic.git"
SAMPLE_REPO_NAME = "react-basic"
REFRESHED_REPOSITORY_URL = "https://github.com/alexweininger/angular-basic.git"


@dataclass
class ResolvedStaticWebAppModel(ResourceModel):
    """Static web app model plus its linked source repository."""

    repository_url: str = ""
    repo_name: str = ""


class StaticWebAppPresenter(ServicePresenter[ResolvedStaticWebAppModel]):
    service = Service.STATIC_WEB_APP

    def __init__(self, resolve_delay: float = DEFAULT_RESOLVE_DELAY_SECONDS) -> None:
        self.resolve_delay = max(0.0, float(resolve_delay))

    def create_tree_item(self, model: ResourceModel) -> DisplayItem:
        return DisplayItem(label=f"Static Web App ({model.id})")

    async def resolve_model(self, model: ResourceModel) -> ResolvedStaticWebAppModel:
        logger.debug("resolving static web app %s (delay %.3fs)", model.id, self.resolve_delay)
        await asyncio.sleep(self.resolve_delay)
        return ResolvedStaticWebAppModel(
            id=model.id,
            name=model.name,
            type=model.type,
            service_id=model.service_id,
            repository_url=SAMPLE_REPOSITORY_URL,
            repo_name=SAMPLE_REPO_NAME,
        )

    def create_resolved_tree_item(self, model: ResolvedStaticWebAppModel) -> DisplayItem:
        return DisplayItem(
            label=f"resolved Static Web App ({model.id})",
            description=model.repo_name,
        )

    async def refresh(self, model: ResolvedStaticWebAppModel) -> None:
        model.repository_url = REFRESHED_REPOSITORY_URL


__all__ = [
    "DEFAULT_RESOLVE_DELAY_SECONDS",
    "ResolvedStaticWebAppModel",
    "StaticWebAppPresenter",
]
