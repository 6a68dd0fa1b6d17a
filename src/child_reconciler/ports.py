"""Interfaces the reconciler needs from its collaborators."""

from __future__ import annotations

from typing import Protocol, TypeVar

from .models import Owner

ChildT = TypeVar("ChildT")


class ObservedStateReader(Protocol[ChildT]):
    """Protocol for reading the current state of a child from a cache."""

    def get(self, namespace: str, name: str) -> ChildT:
        """Return the observed child.

        Raises:
            ResourceNotFoundError: If no such child exists
        """
        ...


class ClusterWriter(Protocol[ChildT]):
    """Protocol for writing children to the authoritative store."""

    def create(self, child: ChildT) -> ChildT:
        """Create the child, failing if it already exists."""
        ...

    def update(self, child: ChildT) -> ChildT:
        """Replace the stored child with the submitted object."""
        ...


class EventSink(Protocol):
    """Protocol for recording events against an owner."""

    def emit(self, subject: Owner, type_: str, reason: str, message: str) -> None:
        """Record an event. Must not raise."""
        ...
