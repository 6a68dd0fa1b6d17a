"""Istio VirtualService instantiation of the reconciler."""

from __future__ import annotations

from typing import Any

from ...accessor import ResourceAccessor
from ...constants import ISTIO_NETWORKING_GROUP, ISTIO_NETWORKING_VERSION, KIND_VIRTUAL_SERVICE
from ...ports import EventSink
from ...utils.cache import ResourceCache
from ...utils.events import KopfEventSink
from .client import ResourceType, get_custom_objects_api
from .reader import CachedResourceReader
from .writer import CustomObjectWriter

VIRTUAL_SERVICE = ResourceType(
    group=ISTIO_NETWORKING_GROUP,
    version=ISTIO_NETWORKING_VERSION,
    kind=KIND_VIRTUAL_SERVICE,
    plural="virtualservices",
)


def new_virtual_service_accessor(
    api: Any = None,
    cache: ResourceCache | None = None,
    event_sink: EventSink | None = None,
) -> ResourceAccessor:
    """Build a ResourceAccessor for VirtualServices.

    Args:
        api: CustomObjectsApi instance (loaded from cluster config if omitted)
        cache: Cache shared by the reader and writer
        event_sink: Event sink (kopf events if omitted)

    Returns:
        Accessor reconciling VirtualServices
    """
    if api is None:
        api = get_custom_objects_api()
    if cache is None:
        cache = ResourceCache()

    return ResourceAccessor(
        reader=CachedResourceReader(api, VIRTUAL_SERVICE, cache),
        writer=CustomObjectWriter(api, VIRTUAL_SERVICE, cache),
        event_sink=event_sink or KopfEventSink(),
        kind=KIND_VIRTUAL_SERVICE,
    )
