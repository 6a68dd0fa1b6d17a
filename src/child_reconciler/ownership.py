"""Controller ownership helpers for child resources."""

from __future__ import annotations

import copy
from typing import Any

from .models import ChildResource, Owner, OwnerReference


def controller_of(child: ChildResource) -> OwnerReference | None:
    """Return the controlling owner reference of a child, if any."""
    for ref in child.owner_references:
        if ref.controller:
            return ref
    return None


def is_controlled_by(child: ChildResource, owner: Owner) -> bool:
    """Check whether ``owner`` is the controller of ``child``.

    Args:
        child: Observed or desired child resource
        owner: Candidate controller

    Returns:
        True if the controller reference matches the owner's kind, name and uid
    """
    ref = controller_of(child)
    if ref is None:
        return False
    return ref.kind == owner.kind and ref.name == owner.name and ref.uid == owner.uid


def make_controller_reference(owner: Owner) -> OwnerReference:
    """Create a controller owner reference pointing at ``owner``."""
    return OwnerReference(
        api_version=owner.api_version,
        kind=owner.kind,
        name=owner.name,
        uid=owner.uid,
        controller=True,
        block_owner_deletion=True,
    )


def new_child(
    owner: Owner,
    api_version: str,
    kind: str,
    name: str,
    spec: dict[str, Any],
    labels: dict[str, str] | None = None,
    annotations: dict[str, str] | None = None,
) -> ChildResource:
    """Build a desired child in the owner's namespace controlled by the owner.

    Args:
        owner: Parent object
        api_version: Child API version (e.g. "networking.istio.io/v1alpha3")
        kind: Child kind
        name: Child name
        spec: Desired specification
        labels: Optional labels
        annotations: Optional annotations

    Returns:
        Desired child resource
    """
    metadata: dict[str, Any] = {}
    if labels:
        metadata["labels"] = dict(labels)
    if annotations:
        metadata["annotations"] = dict(annotations)

    return ChildResource(
        api_version=api_version,
        kind=kind,
        namespace=owner.namespace,
        name=name,
        spec=copy.deepcopy(spec),
        owner_references=[make_controller_reference(owner)],
        metadata=metadata,
    )
