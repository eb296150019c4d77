"""Formatting helpers for printed tree rows."""

from __future__ import annotations

from .presenter.types import CollapsibleState, DisplayItem
from .provider.data_provider import RESOLVE_FAILED_PREFIX, ServiceTreeDataProvider
from .tree_model.types import TreeNode
from .ui_theme import DEFAULT_THEME, UITheme


def format_tree_row(item: DisplayItem, depth: int, theme: UITheme | None = None) -> str:
    """Render one display item as ANSI-styled text indented by ``depth``."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    description = ""
    if item.description:
        color = (
            active_theme.tree_error
            if item.description.startswith(RESOLVE_FAILED_PREFIX)
            else active_theme.tree_description
        )
        description = f" {color}{item.description}{reset}"

    if item.expandable:
        indent = "  " * depth
        marker = "▾ " if item.collapsible_state is CollapsibleState.EXPANDED else "▸ "
        return f"{indent}{active_theme.tree_marker}{marker}{reset}{active_theme.tree_internal}{item.label}{reset}{description}"

    # Leaves pad the marker column so labels line up with internal siblings.
    indent = "  " * depth
    return f"{indent}  {active_theme.tree_leaf}{item.label}{reset}{description}"


def render_tree(
    provider: ServiceTreeDataProvider,
    start: TreeNode | None = None,
    theme: UITheme | None = None,
) -> list[str]:
    """Return rows for every descendant of ``start`` (root when omitted)."""
    lines: list[str] = []

    def visit(children: list[TreeNode], depth: int) -> None:
        for child in children:
            lines.append(format_tree_row(provider.get_tree_item(child), depth, theme))
            visit(provider.get_children(child), depth + 1)

    visit(provider.get_children(start), 0)
    return lines


__all__ = [
    "format_tree_row",
    "render_tree",
]
