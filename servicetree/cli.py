"""Command-line front door for servicetree.

Builds the sample tree and a provider from persisted config plus CLI options,
then prints the tree, or one node's children or parent.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace

from .config import load_provider_config
from .errors import ServiceTreeError
from .presenter.registry import default_registry
from .provider.data_provider import ServiceTreeDataProvider
from .rendering import format_tree_row, render_tree
from .tree_model.sample import build_sample_tree
from .tree_model.store import TreeStore
from .ui_theme import available_theme_names, resolve_theme


def _non_negative_float(value: str) -> float:
    """argparse type for non-negative float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print the service resource tree shown in the sidebar view.")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--children", metavar="ID", help="Print only the immediate children of node ID.")
    target.add_argument("--parent", metavar="ID", help="Print only the parent of node ID.")
    parser.add_argument("--resolve", action="store_true", help="Resolve every node before printing.")
    parser.add_argument(
        "--resolve-delay",
        type=_non_negative_float,
        default=None,
        metavar="SECONDS",
        help="Simulated resolve latency (default: from config, else 0.8).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr diagnostics (default: WARNING).",
    )
    return parser


def build_provider(resolve_delay: float | None = None) -> ServiceTreeDataProvider:
    """Create a provider over the sample tree using persisted config."""
    config = load_provider_config()
    if resolve_delay is not None:
        config = replace(config, resolve_delay_seconds=resolve_delay)
    store = TreeStore(build_sample_tree())
    store.validate()
    registry = default_registry(resolve_delay=config.resolve_delay_seconds)
    return ServiceTreeDataProvider(store, registry, config=config)


def run(args: argparse.Namespace) -> list[str]:
    """Execute parsed CLI options and return output rows."""
    provider = build_provider(args.resolve_delay)
    theme_name = args.theme if args.theme is not None else provider.config.theme
    theme = resolve_theme(theme_name, no_color=args.no_color or not sys.stdout.isatty())

    if args.resolve:
        asyncio.run(provider.resolve_all())

    if args.parent is not None:
        parent = provider.get_parent(args.parent)
        if parent is None:
            return []
        return [format_tree_row(provider.get_tree_item(parent), 0, theme)]
    if args.children is not None:
        return [format_tree_row(provider.get_tree_item(child), 0, theme) for child in provider.get_children(args.children)]
    return render_tree(provider, theme=theme)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, print the requested rows and return the exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        rows = run(args)
    except ServiceTreeError as exc:
        raise SystemExit(f"servicetree: {exc}") from exc
    for row in rows:
        sys.stdout.write(row + "\n")
    return 0


__all__ = [
    "build_parser",
    "build_provider",
    "run",
    "main",
]
