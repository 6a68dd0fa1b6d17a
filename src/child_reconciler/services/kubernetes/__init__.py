"""Kubernetes adapters for the reconciler ports."""

from .client import ResourceType, get_custom_objects_api
from .reader import CachedResourceReader
from .virtualservice import VIRTUAL_SERVICE, new_virtual_service_accessor
from .writer import CustomObjectWriter

__all__ = [
    "ResourceType",
    "get_custom_objects_api",
    "CachedResourceReader",
    "CustomObjectWriter",
    "VIRTUAL_SERVICE",
    "new_virtual_service_accessor",
]
