"""Typed models for owners and child resources."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Owner:
    """Reference to the parent object that controls a child."""

    api_version: str
    kind: str
    namespace: str
    name: str
    uid: str

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> Owner:
        """Build an owner from a Kubernetes object body."""
        meta = body.get("metadata", {})
        return cls(
            api_version=body.get("apiVersion", ""),
            kind=body.get("kind", ""),
            namespace=meta.get("namespace", ""),
            name=meta.get("name", ""),
            uid=meta.get("uid", ""),
        )

    def to_body(self) -> dict[str, Any]:
        """Return the minimal object body used as an event subject."""
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {
                "name": self.name,
                "namespace": self.namespace,
                "uid": self.uid,
            },
        }


@dataclass
class OwnerReference:
    """An entry of ``metadata.ownerReferences``."""

    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool = False
    block_owner_deletion: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OwnerReference:
        return cls(
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
            name=data.get("name", ""),
            uid=data.get("uid", ""),
            controller=bool(data.get("controller", False)),
            block_owner_deletion=bool(data.get("blockOwnerDeletion", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "name": self.name,
            "uid": self.uid,
        }
        if self.controller:
            data["controller"] = True
        if self.block_owner_deletion:
            data["blockOwnerDeletion"] = True
        return data


@dataclass
class ChildResource:
    """A child resource, either desired or observed.

    ``metadata`` holds every metadata field except name, namespace and
    ownerReferences, which have their own typed attributes. ``spec`` is
    never interpreted, only compared.
    """

    api_version: str
    kind: str
    namespace: str
    name: str
    spec: dict[str, Any] = field(default_factory=dict)
    owner_references: list[OwnerReference] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    status: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, body: dict[str, Any]) -> ChildResource:
        """Build a child from a Kubernetes object body.

        The body is copied, so later changes to it do not leak into the
        returned instance.
        """
        body = copy.deepcopy(body)
        meta = body.get("metadata") or {}
        owner_refs = [OwnerReference.from_dict(ref) for ref in meta.pop("ownerReferences", None) or []]
        name = meta.pop("name", "")
        namespace = meta.pop("namespace", "")
        return cls(
            api_version=body.get("apiVersion", ""),
            kind=body.get("kind", ""),
            namespace=namespace,
            name=name,
            spec=body.get("spec") or {},
            owner_references=owner_refs,
            metadata=meta,
            status=body.get("status"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the Kubernetes object body for this child."""
        metadata = copy.deepcopy(self.metadata)
        metadata["name"] = self.name
        metadata["namespace"] = self.namespace
        if self.owner_references:
            metadata["ownerReferences"] = [ref.to_dict() for ref in self.owner_references]

        body: dict[str, Any] = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": metadata,
            "spec": copy.deepcopy(self.spec),
        }
        if self.status is not None:
            body["status"] = copy.deepcopy(self.status)
        return body

    def deep_copy(self) -> ChildResource:
        """Return an independent copy safe to mutate."""
        return copy.deepcopy(self)

    @property
    def resource_version(self) -> str | None:
        return self.metadata.get("resourceVersion")
