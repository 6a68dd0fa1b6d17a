"""TTL cache of observed Kubernetes objects."""

from __future__ import annotations

import copy
import os
import threading
import time
from typing import Any, Optional

_DEFAULT_TTL = float(os.getenv("K8S_CACHE_TTL_SECONDS", "30.0"))  # Default 30 seconds


class ResourceCache:
    """Thread-safe cache of object bodies keyed by kind, namespace and name.

    Entries are stored and returned as deep copies so a value handed to one
    reader can never change what another reader sees.
    """

    def __init__(self, ttl: float | None = None):
        self.ttl = _DEFAULT_TTL if ttl is None else ttl
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Get an object from cache if it hasn't expired.

        Args:
            key: Cache key (typically "kind:namespace:name")

        Returns:
            Copy of the cached object or None if not found or expired
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            obj, timestamp = entry
            if time.time() - timestamp > self.ttl:
                # Expired, remove from cache
                del self._entries[key]
                return None

            return copy.deepcopy(obj)

    def set(self, key: str, obj: Any) -> None:
        """Store a copy of an object with the current timestamp.

        Args:
            key: Cache key (typically "kind:namespace:name")
            obj: Object to cache
        """
        with self._lock:
            self._entries[key] = (copy.deepcopy(obj), time.time())

    def delete(self, key: str) -> None:
        """Remove a single entry if present."""
        with self._lock:
            self._entries.pop(key, None)

    def invalidate(self, pattern: Optional[str] = None) -> None:
        """Invalidate cache entries.

        Args:
            pattern: Optional substring to match keys (if None, clears all)
        """
        with self._lock:
            if pattern is None:
                self._entries.clear()
            else:
                for key in [key for key in self._entries if pattern in key]:
                    del self._entries[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def make_cache_key(kind: str, namespace: str, name: str) -> str:
    """Create a cache key for a Kubernetes resource.

    Args:
        kind: Resource kind (e.g., "VirtualService")
        namespace: Resource namespace
        name: Resource name

    Returns:
        Cache key string
    """
    return f"{kind}:{namespace}:{name}"
