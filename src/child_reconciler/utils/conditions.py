"""Utilities for managing Kubernetes conditions."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ..constants import COND_READY, REASON_OWNERSHIP_CONFLICT, REASON_RECONCILED


def update_condition(
    conditions: list[dict[str, Any]],
    condition_type: str,
    status: str,
    reason: str,
    message: str,
    observed_generation: int | None = None,
) -> list[dict[str, Any]]:
    """Update or add a condition to the conditions list.

    Args:
        conditions: List of existing conditions
        condition_type: Type of condition
        status: Status of condition ("True", "False", "Unknown")
        reason: Reason for the condition
        message: Human-readable message
        observed_generation: Generation when condition was observed

    Returns:
        Updated list of conditions
    """
    now = datetime.now(timezone.utc).isoformat()

    existing_idx = None
    for idx, cond in enumerate(conditions):
        if cond.get("type") == condition_type:
            existing_idx = idx
            break

    new_condition = {
        "type": condition_type,
        "status": status,
        "reason": reason,
        "message": message,
        "lastTransitionTime": now,
    }

    if observed_generation is not None:
        new_condition["observedGeneration"] = observed_generation

    if existing_idx is not None:
        existing = conditions[existing_idx]
        # Only update lastTransitionTime if status changed
        if existing.get("status") == status:
            new_condition["lastTransitionTime"] = existing.get("lastTransitionTime", now)
        conditions[existing_idx] = new_condition
    else:
        conditions.append(new_condition)

    return conditions


def set_ready_condition(
    conditions: list[dict[str, Any]],
    status: bool,
    message: str,
    reason: str | None = None,
    observed_generation: int | None = None,
) -> list[dict[str, Any]]:
    """Set the Ready condition."""
    if reason is None:
        reason = REASON_RECONCILED if status else "NotReady"
    return update_condition(
        conditions,
        COND_READY,
        "True" if status else "False",
        reason,
        message,
        observed_generation,
    )


def set_ownership_conflict_condition(
    conditions: list[dict[str, Any]],
    message: str,
    observed_generation: int | None = None,
) -> list[dict[str, Any]]:
    """Mark the owner not ready because a child name is taken by another owner."""
    return set_ready_condition(
        conditions,
        False,
        message,
        reason=REASON_OWNERSHIP_CONFLICT,
        observed_generation=observed_generation,
    )
