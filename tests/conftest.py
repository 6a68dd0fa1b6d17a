"""Shared fixtures and in-memory ports for reconciler tests."""

from __future__ import annotations

from typing import Any

import pytest

from child_reconciler.errors import ResourceNotFoundError
from child_reconciler.models import ChildResource, Owner, OwnerReference


class FakeStore:
    """In-memory reader and writer.

    ``get`` hands out the stored instance itself, the way a shared informer
    cache would, so tests can detect in-place mutation.
    """

    def __init__(self, objects: list[ChildResource] | None = None, calls: list[str] | None = None):
        self.objects: dict[tuple[str, str], ChildResource] = {}
        for obj in objects or []:
            self.objects[(obj.namespace, obj.name)] = obj.deep_copy()
        self.created: list[ChildResource] = []
        self.updated: list[ChildResource] = []
        self.get_error: Exception | None = None
        self.create_error: Exception | None = None
        self.update_error: Exception | None = None
        self._version = 1
        self.calls = calls if calls is not None else []

    def get(self, namespace: str, name: str) -> ChildResource:
        self.calls.append("get")
        if self.get_error is not None:
            raise self.get_error
        try:
            return self.objects[(namespace, name)]
        except KeyError:
            raise ResourceNotFoundError(namespace, name) from None

    def create(self, child: ChildResource) -> ChildResource:
        self.calls.append("create")
        self.created.append(child)
        if self.create_error is not None:
            raise self.create_error
        return self._store(child)

    def update(self, child: ChildResource) -> ChildResource:
        self.calls.append("update")
        self.updated.append(child)
        if self.update_error is not None:
            raise self.update_error
        return self._store(child)

    @property
    def writes(self) -> int:
        return len(self.created) + len(self.updated)

    def _store(self, child: ChildResource) -> ChildResource:
        self._version += 1
        stored = child.deep_copy()
        stored.metadata["resourceVersion"] = str(self._version)
        self.objects[(stored.namespace, stored.name)] = stored
        return stored.deep_copy()


class RaisingEventSink:
    """Event sink whose backend is down."""

    def __init__(self) -> None:
        self.attempts = 0

    def emit(self, subject: Owner, type_: str, reason: str, message: str) -> None:
        self.attempts += 1
        raise RuntimeError("event API down")


class RecordingEventSink:
    """Event sink that remembers every event."""

    def __init__(self, calls: list[str] | None = None) -> None:
        self.events: list[tuple[Owner, str, str, str]] = []
        self.calls = calls if calls is not None else []

    def emit(self, subject: Owner, type_: str, reason: str, message: str) -> None:
        self.calls.append("event")
        self.events.append((subject, type_, reason, message))

    @property
    def reasons(self) -> list[tuple[str, str]]:
        return [(type_, reason) for _, type_, reason, _ in self.events]


def make_virtual_service(owner_ref: OwnerReference, hosts: list[str], **metadata: Any) -> ChildResource:
    return ChildResource(
        api_version="networking.istio.io/v1alpha3",
        kind="VirtualService",
        namespace="default",
        name="vs",
        spec={"hosts": list(hosts)},
        owner_references=[owner_ref],
        metadata=dict(metadata),
    )


@pytest.fixture
def owner() -> Owner:
    return Owner(api_version="v1", kind="Service", namespace="default", name="ownerObj", uid="abcd")


@pytest.fixture
def owner_ref(owner: Owner) -> OwnerReference:
    return OwnerReference(
        api_version=owner.api_version,
        kind=owner.kind,
        name=owner.name,
        uid=owner.uid,
        controller=True,
    )


@pytest.fixture
def desired(owner_ref: OwnerReference) -> ChildResource:
    return make_virtual_service(owner_ref, ["desired.example.com"])


@pytest.fixture
def origin(owner_ref: OwnerReference) -> ChildResource:
    return make_virtual_service(
        owner_ref,
        ["origin.example.com"],
        uid="vs-uid",
        resourceVersion="1",
        labels={"app": "web"},
    )


@pytest.fixture
def sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def make_store() -> type[FakeStore]:
    return FakeStore


@pytest.fixture
def make_vs():
    return make_virtual_service


@pytest.fixture
def raising_sink() -> RaisingEventSink:
    return RaisingEventSink()


@pytest.fixture
def make_sink() -> type[RecordingEventSink]:
    return RecordingEventSink
