"""Cluster writer backed by the CustomObjectsApi."""

from __future__ import annotations

from typing import Any

from ...models import ChildResource
from ...utils.cache import ResourceCache, make_cache_key
from ...utils.rate_limit import rate_limit_k8s
from .client import ResourceType, record_api_call


class CustomObjectWriter:
    """Creates and replaces children of one resource type.

    Errors from the API server are never retried or wrapped.
    """

    def __init__(self, api: Any, resource_type: ResourceType, cache: ResourceCache | None = None):
        self.api = api
        self.resource_type = resource_type
        self.cache = cache

    def create(self, child: ChildResource) -> ChildResource:
        """Create a child.

        Args:
            child: Child to create

        Returns:
            Child as stored by the API server
        """
        with record_api_call(f"create_{self.resource_type.kind.lower()}"):
            body = rate_limit_k8s(self.api.create_namespaced_custom_object)(
                group=self.resource_type.group,
                version=self.resource_type.version,
                namespace=child.namespace,
                plural=self.resource_type.plural,
                body=child.to_dict(),
            )
        return self._store(body)

    def update(self, child: ChildResource) -> ChildResource:
        """Replace a child; the body carries the observed resourceVersion.

        Args:
            child: Full child object to submit

        Returns:
            Child as stored by the API server
        """
        with record_api_call(f"update_{self.resource_type.kind.lower()}"):
            body = rate_limit_k8s(self.api.replace_namespaced_custom_object)(
                group=self.resource_type.group,
                version=self.resource_type.version,
                namespace=child.namespace,
                plural=self.resource_type.plural,
                name=child.name,
                body=child.to_dict(),
            )
        return self._store(body)

    def _store(self, body: dict[str, Any]) -> ChildResource:
        child = ChildResource.from_dict(body)
        if self.cache is not None:
            self.cache.set(make_cache_key(self.resource_type.kind, child.namespace, child.name), body)
        return child
