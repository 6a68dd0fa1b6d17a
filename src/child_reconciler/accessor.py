"""Reconciliation of a single owned child resource."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from . import metrics
from .constants import (
    CONTROLLER_NAME,
    EVENT_REASON_CREATED,
    EVENT_REASON_CREATION_FAILED,
    EVENT_REASON_UPDATED,
    RESULT_CONFLICT,
    RESULT_CREATED,
    RESULT_ERROR,
    RESULT_UNCHANGED,
    RESULT_UPDATED,
)
from .equality import semantic_equal
from .errors import OwnershipConflictError, ResourceNotFoundError
from .logging import log_resource_event
from .models import ChildResource, Owner
from .ownership import controller_of, is_controlled_by
from .ports import ClusterWriter, EventSink, ObservedStateReader
from .tracing import trace_span
from .utils.errors import sanitize_exception
from .utils.events import emit_created, emit_creation_failed, emit_updated


class ResourceAccessor:
    """Gets and writes children of one kind on behalf of their owners.

    The accessor holds no mutable state; one instance can be shared by any
    number of workers as long as each owner key is processed by one worker
    at a time.
    """

    def __init__(
        self,
        reader: ObservedStateReader[ChildResource],
        writer: ClusterWriter[ChildResource],
        event_sink: EventSink,
        kind: str,
    ):
        """Initialize the accessor.

        Args:
            reader: Cached view of existing children
            writer: Authoritative create/update path
            event_sink: Where Created/Updated/CreationFailed events go
            kind: Child kind, used in events, logs and metrics
        """
        self.reader = reader
        self.writer = writer
        self.event_sink = event_sink
        self.kind = kind
        self.logger = logging.getLogger(__name__)

    def reconcile(self, owner: Owner, desired: ChildResource) -> ChildResource:
        """Converge the child named by ``desired`` to its desired spec.

        Creates the child when it is absent, replaces its spec when the
        observed one differs, and leaves it alone when it already matches.
        Neither ``desired`` nor the observed snapshot is mutated.

        Args:
            owner: Parent that must control the child
            desired: Desired child, carrying a controller reference to ``owner``

        Returns:
            The created, updated or unchanged child

        Raises:
            OwnershipConflictError: If a same-named child is controlled by someone else,
                or if ``desired`` itself is not controlled by ``owner``
            Exception: Reader and writer errors are re-raised unchanged
        """
        ns = desired.namespace
        name = desired.name
        attributes = {
            "resource.namespace": ns,
            "resource.name": name,
            "owner.name": owner.name,
        }

        start_time = time.time()
        with trace_span("reconcile_child", kind=self.kind, attributes=attributes):
            try:
                try:
                    observed = self.reader.get(ns, name)
                except ResourceNotFoundError:
                    if not is_controlled_by(desired, owner):
                        raise OwnershipConflictError(owner, self.kind, ns, name, controller_of(desired))
                    return self._create(owner, desired)

                if not is_controlled_by(observed, owner):
                    raise OwnershipConflictError(owner, self.kind, ns, name, controller_of(observed))

                if semantic_equal(observed.spec, desired.spec):
                    metrics.reconcile_total.labels(kind=self.kind, result=RESULT_UNCHANGED).inc()
                    return observed

                return self._update(owner, observed, desired)
            except OwnershipConflictError as e:
                metrics.reconcile_total.labels(kind=self.kind, result=RESULT_CONFLICT).inc()
                self._log(owner, desired, logging.WARNING, "conflict", "OwnershipConflict", str(e))
                raise
            except Exception as e:
                metrics.error_total.labels(kind=self.kind, error_type=type(e).__name__).inc()
                metrics.reconcile_total.labels(kind=self.kind, result=RESULT_ERROR).inc()
                raise
            finally:
                duration = time.time() - start_time
                metrics.reconcile_duration_seconds.labels(kind=self.kind).observe(duration)

    def _create(self, owner: Owner, desired: ChildResource) -> ChildResource:
        ns, name = desired.namespace, desired.name
        try:
            created = self.writer.create(desired.deep_copy())
        except Exception as e:
            self._log(
                owner, desired, logging.ERROR, "error", "CreationFailed",
                f"Failed to create {self.kind}", error=sanitize_exception(e),
            )
            self._emit(owner, desired, EVENT_REASON_CREATION_FAILED, emit_creation_failed, ns, name, e)
            raise

        metrics.reconcile_total.labels(kind=self.kind, result=RESULT_CREATED).inc()
        self._log(owner, desired, logging.INFO, "created", "Created", f"Created {self.kind}")
        self._emit(owner, desired, EVENT_REASON_CREATED, emit_created, name)
        return created

    def _update(self, owner: Owner, observed: ChildResource, desired: ChildResource) -> ChildResource:
        ns, name = desired.namespace, desired.name
        metrics.drift_detected_total.labels(kind=self.kind).inc()

        # The observed child belongs to a shared cache; only touch a copy.
        existing = observed.deep_copy()
        existing.spec = desired.deep_copy().spec
        try:
            updated = self.writer.update(existing)
        except Exception as e:
            self._log(
                owner, desired, logging.ERROR, "error", "UpdateFailed",
                f"Failed to update {self.kind}", error=sanitize_exception(e),
            )
            raise

        metrics.reconcile_total.labels(kind=self.kind, result=RESULT_UPDATED).inc()
        self._log(owner, desired, logging.INFO, "updated", "Updated", f"Updated {self.kind} spec")
        self._emit(owner, desired, EVENT_REASON_UPDATED, emit_updated, ns, name)
        return updated

    def _emit(self, owner: Owner, child: ChildResource, reason: str, emit: Callable[..., None], *args: Any) -> None:
        """Post an event; a failing sink never changes the reconcile outcome."""
        try:
            emit(self.event_sink, owner, self.kind, *args)
        except Exception as e:
            metrics.event_emit_failures_total.labels(reason=reason).inc()
            self._log(
                owner, child, logging.WARNING, "event_failed", reason,
                f"Failed to post {reason} event", error=sanitize_exception(e),
            )

    def _log(
        self,
        owner: Owner,
        child: ChildResource,
        level: int,
        event: str,
        reason: str,
        message: str,
        **kwargs: object,
    ) -> None:
        log_resource_event(
            self.logger,
            controller=CONTROLLER_NAME,
            resource_kind=self.kind,
            resource_name=child.name,
            namespace=child.namespace,
            uid=child.metadata.get("uid", ""),
            event=event,
            reason=reason,
            message=message,
            level=level,
            owner_kind=owner.kind,
            owner_name=owner.name,
            **kwargs,
        )
