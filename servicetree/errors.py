"""Exception types raised by servicetree.

Not-found lookups never raise; these cover configuration inconsistencies and
failed resolve calls.
"""

from __future__ import annotations


class ServiceTreeError(Exception):
    """Base class for servicetree errors."""


class UnknownServiceError(ServiceTreeError, LookupError):
    """A node references a service category with no registered presenter."""

    def __init__(self, service: object) -> None:
        self.service = service
        super().__init__(f"no presenter registered for service {service!r}")


class InvalidTreeError(ServiceTreeError, ValueError):
    """A tree violates the unique-id / single-root precondition."""


class ResolveError(ServiceTreeError):
    """A presenter failed to resolve the extra data for a node."""

    def __init__(self, node_id: str, reason: str) -> None:
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"failed to resolve {node_id!r}: {reason}")


__all__ = [
    "ServiceTreeError",
    "UnknownServiceError",
    "InvalidTreeError",
    "ResolveError",
]
