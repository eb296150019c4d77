"""Display-item and model datatypes shared by presenters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class CollapsibleState(Enum):
    """Expand/collapse tri-state of a displayed row."""

    NONE = 0
    COLLAPSED = 1
    EXPANDED = 2


@dataclass(frozen=True)
class DisplayItem:
    """Renderable description of one node for the host view."""

    label: str
    description: str | None = None
    collapsible_state: CollapsibleState = CollapsibleState.NONE
    id: str | None = None

    @property
    def expandable(self) -> bool:
        return self.collapsible_state is not CollapsibleState.NONE

    def with_state(self, state: CollapsibleState, *, item_id: str | None = None) -> "DisplayItem":
        """Return a copy with ``state`` (and optionally ``item_id``) overlaid."""
        return replace(self, collapsible_state=state, id=item_id if item_id is not None else self.id)


@dataclass
class ResourceModel:
    """Minimal model a presenter builds its placeholder item from.

    Not frozen: resolved subclasses are mutated in place by refresh hooks.
    """

    id: str
    name: str
    type: str
    service_id: str


__all__ = [
    "CollapsibleState",
    "DisplayItem",
    "ResourceModel",
]
