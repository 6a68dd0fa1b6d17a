"""Utility functions for the child reconciler."""

from .cache import ResourceCache, make_cache_key
from .conditions import set_ownership_conflict_condition, set_ready_condition, update_condition
from .errors import sanitize_exception
from .events import KopfEventSink, emit_event
from .rate_limit import is_rate_limit_error, rate_limit_k8s

__all__ = [
    "ResourceCache",
    "make_cache_key",
    "update_condition",
    "set_ready_condition",
    "set_ownership_conflict_condition",
    "sanitize_exception",
    "emit_event",
    "KopfEventSink",
    "rate_limit_k8s",
    "is_rate_limit_error",
]
