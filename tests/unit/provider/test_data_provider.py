"""Tests for the tree data provider and its two-phase reveal.

Validates display items, expand state, change events, caching, refresh,
and inline reporting of failed resolves.
"""

from __future__ import annotations

import asyncio
import unittest

from servicetree.config import ProviderConfig
from servicetree.errors import UnknownServiceError
from servicetree.presenter import (
    CollapsibleState,
    PresenterRegistry,
    ResolvedStaticWebAppModel,
    ResourceModel,
    ServicePresenter,
    StaticWebAppPresenter,
    default_registry,
)
from servicetree.presenter.static_web_app import REFRESHED_REPOSITORY_URL, SAMPLE_REPOSITORY_URL
from servicetree.provider import RESOLVE_FAILED_PREFIX, ServiceTreeDataProvider
from servicetree.tree_model import ROOT_ID, InternalNode, LeafNode, Service, TreeStore, build_sample_tree


class NoRefreshPresenter(ServicePresenter[ResolvedStaticWebAppModel]):
    """Static web app rendering without a refresh hook."""

    service = Service.STATIC_WEB_APP

    def __init__(self, resolve_delay: float = 0) -> None:
        self._inner = StaticWebAppPresenter(resolve_delay=resolve_delay)

    def create_tree_item(self, model: ResourceModel):
        return self._inner.create_tree_item(model)

    async def resolve_model(self, model: ResourceModel):
        return await self._inner.resolve_model(model)

    def create_resolved_tree_item(self, model: ResolvedStaticWebAppModel):
        return self._inner.create_resolved_tree_item(model)


class FlakyPresenter(NoRefreshPresenter):
    """Presenter failing its first ``failures`` resolves."""

    def __init__(self, failures: int) -> None:
        super().__init__(resolve_delay=0)
        self.failures = failures
        self.calls = 0

    async def resolve_model(self, model: ResourceModel):
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError("backend unavailable")
        return await super().resolve_model(model)


class HangingPresenter(StaticWebAppPresenter):
    async def resolve_model(self, model: ResourceModel):
        await asyncio.sleep(10)
        return await super().resolve_model(model)


def _provider(registry: PresenterRegistry | None = None, config: ProviderConfig | None = None) -> ServiceTreeDataProvider:
    return ServiceTreeDataProvider(
        TreeStore(build_sample_tree()),
        registry if registry is not None else default_registry(resolve_delay=0),
        config=config,
    )


class DataProviderQueryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.provider = _provider()
        self.store = self.provider.store

    def test_leaf_item_is_placeholder_and_not_expandable(self) -> None:
        item = self.provider.get_tree_item(LeafNode(id="hello1", service=Service.STATIC_WEB_APP))
        self.assertEqual(item.label, "Static Web App (hello1)")
        self.assertIsNone(item.description)
        self.assertFalse(item.expandable)
        self.assertEqual(item.collapsible_state, CollapsibleState.NONE)
        self.assertEqual(item.id, "hello1")

    def test_internal_item_is_collapsed(self) -> None:
        group = self.store.find_node("resourceGroup/1")
        item = self.provider.get_tree_item(group)
        self.assertTrue(item.expandable)
        self.assertEqual(item.collapsible_state, CollapsibleState.COLLAPSED)

    def test_internal_node_without_children_is_expandable(self) -> None:
        empty = InternalNode(id="empty", service=Service.STATIC_WEB_APP)
        self.assertTrue(self.provider.get_tree_item(empty).expandable)

    def test_unknown_service_propagates(self) -> None:
        provider = _provider(registry=PresenterRegistry())
        with self.assertRaises(UnknownServiceError):
            provider.get_tree_item(self.store.find_node("hello1"))

    def test_children_and_parent_accept_nodes_or_ids(self) -> None:
        group = self.store.find_node("resourceGroup/2")
        self.assertEqual(self.provider.get_children(group), self.provider.get_children("resourceGroup/2"))
        self.assertEqual(self.provider.get_children(), self.store.get_children(ROOT_ID))
        self.assertIs(self.provider.get_parent("hello5"), group)
        self.assertIsNone(self.provider.get_parent(self.store.root))
        self.assertEqual(self.provider.get_children("hello12"), [])

    def test_get_tree_item_is_idempotent(self) -> None:
        node = self.store.find_node("hello3")
        self.assertEqual(self.provider.get_tree_item(node), self.provider.get_tree_item(node))


class DataProviderResolveTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.events: list = []

    def _watch(self, provider: ServiceTreeDataProvider) -> None:
        provider.on_did_change_tree_data.subscribe(self.events.append)

    async def test_resolve_swaps_in_resolved_item_and_fires_once(self) -> None:
        provider = _provider()
        self._watch(provider)
        node = provider.store.find_node("hello2")

        item = await provider.resolve_tree_item(node)

        self.assertEqual(item.label, "resolved Static Web App (hello2)")
        self.assertEqual(item.description, "react-basic")
        self.assertFalse(item.expandable)
        self.assertEqual(self.events, [node])
        self.assertIn("hello2", provider.cache)
        self.assertEqual(provider.get_tree_item(node), item)

    async def test_second_resolve_uses_cache_without_event(self) -> None:
        provider = _provider()
        self._watch(provider)
        node = provider.store.find_node("hello2")
        first = await provider.resolve_tree_item(node)
        second = await provider.resolve_tree_item(node)
        self.assertEqual(first, second)
        self.assertEqual(len(self.events), 1)

    async def test_resolved_internal_node_stays_expandable(self) -> None:
        provider = _provider()
        item = await provider.resolve_tree_item(provider.store.find_node("resourceGroup/1"))
        self.assertTrue(item.expandable)

    async def test_refresh_mutates_cached_model(self) -> None:
        provider = _provider()
        self._watch(provider)
        node = provider.store.find_node("hello4")
        await provider.resolve_tree_item(node)
        self.assertEqual(provider.cache.get("hello4").repository_url, SAMPLE_REPOSITORY_URL)

        await provider.refresh(node)

        self.assertEqual(provider.cache.get("hello4").repository_url, REFRESHED_REPOSITORY_URL)
        self.assertEqual(self.events, [node, node])

    async def test_refresh_without_cached_model_invalidates(self) -> None:
        provider = _provider()
        self._watch(provider)
        node = provider.store.find_node("hello4")
        await provider.refresh(node)
        self.assertNotIn("hello4", provider.cache)
        self.assertEqual(self.events, [node])

    async def test_refresh_drops_cached_model_when_presenter_cannot_refresh(self) -> None:
        provider = _provider(registry=PresenterRegistry([NoRefreshPresenter()]))
        node = provider.store.find_node("hello5")
        await provider.resolve_tree_item(node)
        self.assertIn("hello5", provider.cache)
        self._watch(provider)

        await provider.refresh(node)

        self.assertNotIn("hello5", provider.cache)
        self.assertEqual(provider.get_tree_item(node).label, "Static Web App (hello5)")
        self.assertEqual(self.events, [node])

    async def test_refresh_all_discards_resolve_still_in_flight(self) -> None:
        provider = _provider(registry=default_registry(resolve_delay=0.05))
        self._watch(provider)
        node = provider.store.find_node("hello1")

        pending = asyncio.create_task(provider.resolve_tree_item(node))
        await asyncio.sleep(0.01)
        await provider.refresh()
        item = await pending

        self.assertNotIn("hello1", provider.cache)
        self.assertEqual(item.label, "Static Web App (hello1)")
        self.assertEqual(self.events, [None])

    async def test_refresh_node_discards_resolve_still_in_flight(self) -> None:
        provider = _provider(registry=default_registry(resolve_delay=0.05))
        self._watch(provider)
        node = provider.store.find_node("hello3")

        pending = asyncio.create_task(provider.resolve_tree_item(node))
        await asyncio.sleep(0.01)
        await provider.refresh(node)
        await pending

        self.assertNotIn("hello3", provider.cache)
        self.assertEqual(self.events, [node])
        resolved = await provider.resolve_tree_item(node)
        self.assertEqual(resolved.label, "resolved Static Web App (hello3)")

    async def test_refresh_everything_clears_cache_and_fires_none(self) -> None:
        provider = _provider()
        await provider.resolve_all()
        self.assertEqual(len(provider.cache), len(list(provider.store.iter_nodes())))
        self._watch(provider)

        await provider.refresh()

        self.assertEqual(len(provider.cache), 0)
        self.assertEqual(self.events, [None])
        item = provider.get_tree_item(provider.store.find_node("hello1"))
        self.assertEqual(item.label, "Static Web App (hello1)")

    async def test_failed_resolve_surfaces_inline_and_retries(self) -> None:
        flaky = FlakyPresenter(failures=1)
        provider = _provider(registry=PresenterRegistry([flaky]))
        self._watch(provider)
        node = provider.store.find_node("hello1")

        with self.assertLogs("servicetree.provider.data_provider", level="WARNING"):
            failed = await provider.resolve_tree_item(node)

        self.assertEqual(failed.label, "Static Web App (hello1)")
        self.assertEqual(failed.description, f"{RESOLVE_FAILED_PREFIX}backend unavailable")
        self.assertIsNotNone(provider.cache.failure("hello1"))
        self.assertEqual(provider.get_tree_item(node), failed)

        resolved = await provider.resolve_tree_item(node)

        self.assertEqual(resolved.label, "resolved Static Web App (hello1)")
        self.assertIsNone(provider.cache.failure("hello1"))
        self.assertEqual(flaky.calls, 2)
        self.assertEqual(self.events, [node, node])

    async def test_refresh_clears_recorded_failure(self) -> None:
        provider = _provider(registry=PresenterRegistry([FlakyPresenter(failures=5)]))
        node = provider.store.find_node("hello1")
        with self.assertLogs("servicetree.provider.data_provider", level="WARNING"):
            await provider.resolve_tree_item(node)
        await provider.refresh(node)
        self.assertIsNone(provider.cache.failure("hello1"))
        self.assertIsNone(provider.get_tree_item(node).description)

    async def test_resolve_timeout_is_reported_as_failure(self) -> None:
        provider = _provider(
            registry=PresenterRegistry([HangingPresenter(resolve_delay=0)]),
            config=ProviderConfig(resolve_timeout_seconds=0.01),
        )
        node = provider.store.find_node("hello14")
        with self.assertLogs("servicetree.provider.data_provider", level="WARNING"):
            item = await provider.resolve_tree_item(node)
        self.assertEqual(item.description, f"{RESOLVE_FAILED_PREFIX}timed out after 0.01s")
        self.assertNotIn("hello14", provider.cache)

    async def test_resolve_with_unknown_service_raises(self) -> None:
        provider = _provider(registry=PresenterRegistry())
        with self.assertRaises(UnknownServiceError):
            await provider.resolve_tree_item(provider.store.find_node("hello1"))


if __name__ == "__main__":
    unittest.main()
