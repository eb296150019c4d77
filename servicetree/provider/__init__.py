"""Tree data provider exposed to the host view, plus its resolved-model cache."""

from __future__ import annotations

from .cache import ResolvedModelCache
from .data_provider import RESOLVE_FAILED_PREFIX, VIEW_ID, ServiceTreeDataProvider

__all__ = [
    "VIEW_ID",
    "RESOLVE_FAILED_PREFIX",
    "ResolvedModelCache",
    "ServiceTreeDataProvider",
]
