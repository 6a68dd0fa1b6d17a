"""Observed-state reader backed by a TTL cache and the CustomObjectsApi."""

from __future__ import annotations

from typing import Any

from kubernetes.client.exceptions import ApiException

from ... import metrics
from ...errors import ResourceNotFoundError
from ...models import ChildResource
from ...utils.cache import ResourceCache, make_cache_key
from ...utils.rate_limit import rate_limit_k8s
from .client import ResourceType, record_api_call


class CachedResourceReader:
    """Reads children of one resource type, serving from cache when fresh.

    Every returned ``ChildResource`` is built from a copy of the cached
    body, so callers may not corrupt the cache by mutating it.
    """

    def __init__(self, api: Any, resource_type: ResourceType, cache: ResourceCache | None = None):
        self.api = api
        self.resource_type = resource_type
        self.cache = cache if cache is not None else ResourceCache()

    @property
    def operation(self) -> str:
        return f"get_{self.resource_type.kind.lower()}"

    def get(self, namespace: str, name: str) -> ChildResource:
        """Get a child by namespace and name.

        Args:
            namespace: Child namespace
            name: Child name

        Returns:
            Observed child

        Raises:
            ResourceNotFoundError: If the API server reports 404
            ApiException: For any other API error
        """
        cache_key = make_cache_key(self.resource_type.kind, namespace, name)
        cached = self.cache.get(cache_key)
        if cached is not None:
            metrics.api_call_total.labels(api_type="k8s", operation=self.operation, result="cache_hit").inc()
            return ChildResource.from_dict(cached)

        try:
            with record_api_call(self.operation):
                body = rate_limit_k8s(self.api.get_namespaced_custom_object)(
                    group=self.resource_type.group,
                    version=self.resource_type.version,
                    namespace=namespace,
                    plural=self.resource_type.plural,
                    name=name,
                )
        except ApiException as e:
            if e.status == 404:
                raise ResourceNotFoundError(namespace, name) from e
            raise

        self.cache.set(cache_key, body)
        return ChildResource.from_dict(body)

    def observe(self, event_type: str, body: dict[str, Any]) -> None:
        """Feed a watch event into the cache.

        Bodies older than the cached entry are dropped, so a late watch
        event never replaces what a write just stored.

        Args:
            event_type: Watch event type (ADDED, MODIFIED, DELETED)
            body: Object body from the event
        """
        meta = body.get("metadata", {})
        cache_key = make_cache_key(self.resource_type.kind, meta.get("namespace", ""), meta.get("name", ""))
        if event_type == "DELETED":
            self.cache.delete(cache_key)
            return

        cached = self.cache.get(cache_key)
        if cached is not None:
            cached_version = cached.get("metadata", {}).get("resourceVersion")
            if _is_older(meta.get("resourceVersion"), cached_version):
                return
        self.cache.set(cache_key, body)


def _is_older(incoming: str | None, current: str | None) -> bool:
    """Whether ``incoming`` is an older resourceVersion than ``current``.

    resourceVersions are opaque; only numeric ones are ordered.
    """
    if not incoming or not current or not (incoming.isdigit() and current.isdigit()):
        return False
    return int(incoming) < int(current)
