"""Kubernetes API client helpers."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from kubernetes import client

from ... import metrics
from ...utils.rate_limit import is_rate_limit_error


@dataclass(frozen=True)
class ResourceType:
    """Coordinates of a custom resource served by the API server."""

    group: str
    version: str
    kind: str
    plural: str

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}"


def get_custom_objects_api() -> client.CustomObjectsApi:
    """Get Kubernetes CustomObjectsApi client.

    Returns:
        CustomObjectsApi instance
    """
    from kubernetes import config

    try:
        config.load_incluster_config()
    except config.ConfigException:
        config.load_kube_config()

    return client.CustomObjectsApi()


@contextmanager
def record_api_call(operation: str) -> Iterator[None]:
    """Record success/error counts and duration of one Kubernetes API call.

    Args:
        operation: Operation label (e.g., "get_virtualservice")
    """
    start_time = time.time()
    try:
        yield
        metrics.api_call_total.labels(api_type="k8s", operation=operation, result="success").inc()
    except Exception as e:
        metrics.api_call_total.labels(api_type="k8s", operation=operation, result="error").inc()
        if is_rate_limit_error(e):
            metrics.rate_limit_hits_total.labels(api_type="k8s").inc()
        raise
    finally:
        duration = time.time() - start_time
        metrics.api_call_duration_seconds.labels(api_type="k8s", operation=operation).observe(duration)
