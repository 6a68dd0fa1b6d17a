"""Utilities for emitting Kubernetes events."""

from __future__ import annotations

import logging
from typing import Any

import kopf

from .. import metrics
from ..constants import (
    EVENT_REASON_CREATED,
    EVENT_REASON_CREATION_FAILED,
    EVENT_REASON_UPDATED,
    EVENT_TYPE_NORMAL,
    EVENT_TYPE_WARNING,
)
from ..models import Owner
from ..ports import EventSink
from .errors import sanitize_exception

logger = logging.getLogger(__name__)


def emit_event(
    body: dict[str, Any],
    reason: str,
    message: str,
    type_: str = EVENT_TYPE_NORMAL,
) -> None:
    """Emit a Kubernetes event.

    Args:
        body: Subject object body (apiVersion, kind, metadata)
        reason: Event reason
        message: Event message
        type_: Event type (Normal or Warning)
    """
    kopf.event(
        body,
        reason=reason,
        message=message,
        type=type_,
    )


class KopfEventSink:
    """Event sink posting through kopf; failures are logged, never raised."""

    def emit(self, subject: Owner, type_: str, reason: str, message: str) -> None:
        try:
            emit_event(subject.to_body(), reason, message, type_=type_)
        except Exception as e:
            metrics.event_emit_failures_total.labels(reason=reason).inc()
            logger.warning(
                f"Failed to post {type_}/{reason} event for {subject.kind} "
                f"{subject.namespace}/{subject.name}: {sanitize_exception(e)}"
            )


def emit_created(sink: EventSink, owner: Owner, kind: str, name: str) -> None:
    """Emit child created event."""
    sink.emit(owner, EVENT_TYPE_NORMAL, EVENT_REASON_CREATED, f'Created {kind} "{name}"')


def emit_creation_failed(
    sink: EventSink, owner: Owner, kind: str, namespace: str, name: str, error: Exception
) -> None:
    """Emit child creation failed event."""
    sink.emit(
        owner,
        EVENT_TYPE_WARNING,
        EVENT_REASON_CREATION_FAILED,
        f'Failed to create {kind} "{namespace}"/"{name}": {sanitize_exception(error)}',
    )


def emit_updated(sink: EventSink, owner: Owner, kind: str, namespace: str, name: str) -> None:
    """Emit child updated event."""
    sink.emit(owner, EVENT_TYPE_NORMAL, EVENT_REASON_UPDATED, f'Updated {kind} "{namespace}"/"{name}"')
