"""Exceptions raised by the reconciler."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Owner, OwnerReference


class ReconcileError(Exception):
    """Base class for reconciler errors."""


class ResourceNotFoundError(ReconcileError):
    """Raised by a reader when the requested child does not exist."""

    def __init__(self, namespace: str, name: str):
        self.namespace = namespace
        self.name = name
        super().__init__(f"{namespace}/{name} not found")


class OwnershipConflictError(ReconcileError):
    """A resource with the desired name exists but another owner controls it.

    Retrying does not resolve a naming collision, so callers should surface
    this to the operator instead of requeueing.
    """

    def __init__(
        self,
        owner: Owner,
        kind: str,
        namespace: str,
        name: str,
        controller: OwnerReference | None = None,
    ):
        self.owner = owner
        self.kind = kind
        self.namespace = namespace
        self.name = name
        self.controller = controller
        super().__init__(
            f'{owner.kind} "{owner.name}" does not own {kind}: "{namespace}/{name}"'
        )
