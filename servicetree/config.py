"""Persistent JSON config helpers.

Stores the simulated resolve delay, the resolve timeout and the CLI theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .presenter.static_web_app import DEFAULT_RESOLVE_DELAY_SECONDS

logger = logging.getLogger(__name__)

APP_NAME = "servicetree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class ProviderConfig:
    """Effective settings for a tree data provider."""

    resolve_delay_seconds: float = DEFAULT_RESOLVE_DELAY_SECONDS
    resolve_timeout_seconds: float | None = None
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_seconds(value: object) -> float | None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def load_resolve_delay() -> float:
    """Return the simulated resolve delay; negative or invalid values use the default."""
    seconds = _coerce_seconds(load_config().get("resolve_delay_seconds"))
    if seconds is None or seconds < 0:
        return DEFAULT_RESOLVE_DELAY_SECONDS
    return seconds


def save_resolve_delay(seconds: float) -> None:
    config = load_config()
    config["resolve_delay_seconds"] = max(0.0, float(seconds))
    save_config(config)


def load_resolve_timeout() -> float | None:
    """Return the resolve timeout, or ``None`` when unset or not positive."""
    seconds = _coerce_seconds(load_config().get("resolve_timeout_seconds"))
    if seconds is None or seconds <= 0:
        return None
    return seconds


def save_resolve_timeout(seconds: float | None) -> None:
    config = load_config()
    if seconds is None or seconds <= 0:
        config.pop("resolve_timeout_seconds", None)
    else:
        config["resolve_timeout_seconds"] = float(seconds)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_provider_config() -> ProviderConfig:
    """Collect the persisted provider settings into one value."""
    return ProviderConfig(
        resolve_delay_seconds=load_resolve_delay(),
        resolve_timeout_seconds=load_resolve_timeout(),
        theme=load_theme_name(),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ProviderConfig",
    "load_config",
    "save_config",
    "load_resolve_delay",
    "save_resolve_delay",
    "load_resolve_timeout",
    "save_resolve_timeout",
    "load_theme_name",
    "save_theme_name",
    "load_provider_config",
]
