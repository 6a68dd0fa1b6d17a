"""Owner-aware reconciliation of Kubernetes child resources."""

from .accessor import ResourceAccessor
from .errors import OwnershipConflictError, ReconcileError, ResourceNotFoundError
from .models import ChildResource, Owner, OwnerReference

__all__ = [
    "ResourceAccessor",
    "ChildResource",
    "Owner",
    "OwnerReference",
    "ReconcileError",
    "ResourceNotFoundError",
    "OwnershipConflictError",
]
