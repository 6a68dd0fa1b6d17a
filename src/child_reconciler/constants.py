"""Constants for the child resource reconciler."""

# Controller name used in structured logs
CONTROLLER_NAME = "child-reconciler"

# Istio networking API
ISTIO_NETWORKING_GROUP = "networking.istio.io"
ISTIO_NETWORKING_VERSION = "v1alpha3"

# Resource Kinds
KIND_VIRTUAL_SERVICE = "VirtualService"

# Event Types
EVENT_TYPE_NORMAL = "Normal"
EVENT_TYPE_WARNING = "Warning"

# Event Reasons
EVENT_REASON_CREATED = "Created"
EVENT_REASON_CREATION_FAILED = "CreationFailed"
EVENT_REASON_UPDATED = "Updated"

# Condition Types
COND_READY = "Ready"

# Condition Reasons
REASON_RECONCILED = "Reconciled"
REASON_OWNERSHIP_CONFLICT = "OwnershipConflict"
REASON_RECONCILE_FAILED = "ReconcileFailed"

# Reconcile results (metric label values)
RESULT_CREATED = "created"
RESULT_UPDATED = "updated"
RESULT_UNCHANGED = "unchanged"
RESULT_CONFLICT = "conflict"
RESULT_ERROR = "error"
