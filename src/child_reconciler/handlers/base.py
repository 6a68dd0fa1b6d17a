"""Base handler wiring the accessor into kopf handlers."""

from __future__ import annotations

import logging
from typing import Any

import kopf

from ..accessor import ResourceAccessor
from ..constants import CONTROLLER_NAME, REASON_RECONCILE_FAILED
from ..errors import OwnershipConflictError
from ..logging import log_resource_event
from ..models import ChildResource, Owner
from ..utils.conditions import set_ownership_conflict_condition, set_ready_condition
from ..utils.errors import sanitize_exception


class ChildHandler:
    """Base class for kopf handlers that maintain owned children."""

    def __init__(self, kind: str):
        """Initialize base handler.

        Args:
            kind: The owner resource kind (e.g., "Service")
        """
        self.kind = kind
        self.logger = logging.getLogger(__name__)

    def _get_resource_context(self, meta: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": meta.get("name", "unknown"),
            "namespace": meta.get("namespace", "default"),
            "uid": meta.get("uid", "unknown"),
        }

    def _log(self, level: int, meta: dict[str, Any], message: str, event: str, reason: str, **kwargs: Any) -> None:
        ctx = self._get_resource_context(meta)
        log_resource_event(
            self.logger,
            controller=CONTROLLER_NAME,
            resource_kind=self.kind,
            resource_name=ctx["name"],
            namespace=ctx["namespace"],
            uid=ctx["uid"],
            event=event,
            reason=reason,
            message=message,
            level=level,
            **kwargs,
        )

    def log_info(self, meta: dict[str, Any], message: str, event: str = "info", reason: str = "Info", **kwargs: Any) -> None:
        """Log an info-level structured log message."""
        self._log(logging.INFO, meta, message, event, reason, **kwargs)

    def log_warning(
        self, meta: dict[str, Any], message: str, event: str = "warning", reason: str = "Warning", **kwargs: Any
    ) -> None:
        """Log a warning-level structured log message."""
        self._log(logging.WARNING, meta, message, event, reason, **kwargs)

    def log_error(
        self,
        meta: dict[str, Any],
        message: str,
        error: Exception | None = None,
        event: str = "error",
        reason: str = "Error",
        **kwargs: Any,
    ) -> None:
        """Log an error-level structured log message.

        Args:
            meta: Kubernetes resource metadata
            message: Log message
            error: Optional exception to include sanitized error details
            event: Event type (default: "error")
            reason: Reason for the event (default: "Error")
            **kwargs: Additional fields to include in the log
        """
        if error is not None:
            kwargs["error"] = sanitize_exception(error)
            kwargs["error_type"] = type(error).__name__
        self._log(logging.ERROR, meta, message, event, reason, **kwargs)

    def reconcile_child(
        self,
        accessor: ResourceAccessor,
        body: dict[str, Any],
        status: dict[str, Any],
        patch: kopf.Patch,
        desired: ChildResource,
    ) -> ChildResource:
        """Reconcile one child of the handled owner and reflect it in status.

        Args:
            accessor: Accessor for the child kind
            body: Owner object body as given to the kopf handler
            status: Owner status
            patch: Kopf patch object
            desired: Desired child

        Returns:
            The reconciled child

        Raises:
            kopf.PermanentError: If another owner controls a same-named child
            kopf.TemporaryError: For any other failure, so kopf retries later
        """
        meta = body.get("metadata", {})
        owner = Owner.from_body(body)
        generation = meta.get("generation", 0)
        conditions = list(status.get("conditions", []))

        try:
            child = accessor.reconcile(owner, desired)
        except OwnershipConflictError as e:
            self.log_error(meta, str(e), reason="OwnershipConflict", child=desired.name)
            conditions = set_ownership_conflict_condition(conditions, str(e), generation)
            patch.status.update({"conditions": conditions, "observedGeneration": generation})
            raise kopf.PermanentError(str(e)) from e
        except Exception as e:
            message = f"Failed to reconcile {accessor.kind} {desired.namespace}/{desired.name}: {sanitize_exception(e)}"
            self.log_error(meta, message, error=e, reason=REASON_RECONCILE_FAILED, child=desired.name)
            conditions = set_ready_condition(
                conditions, False, message, reason=REASON_RECONCILE_FAILED, observed_generation=generation
            )
            patch.status.update({"conditions": conditions, "observedGeneration": generation})
            raise kopf.TemporaryError(message) from e

        conditions = set_ready_condition(
            conditions, True, f"{accessor.kind} {child.name} reconciled", observed_generation=generation
        )
        patch.status.update({"conditions": conditions, "observedGeneration": generation})
        return child
