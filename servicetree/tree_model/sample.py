"""Hand-authored sample hierarchy shown by the sidebar view."""

from __future__ import annotations

from .types import ROOT_ID, InternalNode, LeafNode, Service


def _static_web_app(node_id: str) -> LeafNode:
    return LeafNode(id=node_id, service=Service.STATIC_WEB_APP)


def build_sample_tree() -> InternalNode:
    """Return root -> two resource groups of three apps, plus two loose apps."""
    return InternalNode(
        id=ROOT_ID,
        service=Service.STATIC_WEB_APP,
        children=(
            InternalNode(
                id="resourceGroup/1",
                service=Service.STATIC_WEB_APP,
                children=(
                    _static_web_app("hello1"),
                    _static_web_app("hello2"),
                    _static_web_app("hello3"),
                ),
            ),
            _static_web_app("hello12"),
            InternalNode(
                id="resourceGroup/2",
                service=Service.STATIC_WEB_APP,
                children=(
                    _static_web_app("hello4"),
                    _static_web_app("hello5"),
                    _static_web_app("hello6"),
                ),
            ),
            _static_web_app("hello14"),
        ),
    )


__all__ = ["build_sample_tree"]
