"""Tests for tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from child_reconciler import tracing


class TestTraceSpan:
    """Test cases for trace_span."""

    def test_noop_without_tracer(self):
        """Test that spans are skipped until tracing is initialized."""
        with patch.object(tracing, "_tracer", None):
            with tracing.trace_span("reconcile_child", kind="VirtualService") as span:
                assert span is None

    def test_span_attributes(self):
        """Test that the kind is added to span attributes."""
        tracer = MagicMock()
        with patch.object(tracing, "_tracer", tracer):
            with tracing.trace_span("reconcile_child", kind="VirtualService", attributes={"resource.name": "vs"}):
                pass

        tracer.start_as_current_span.assert_called_once_with(
            "reconcile_child",
            attributes={"resource.name": "vs", "resource.kind": "VirtualService"},
        )

    def test_exceptions_propagate(self):
        """Test that errors inside a span are re-raised."""
        tracer = MagicMock()
        with patch.object(tracing, "_tracer", tracer):
            with pytest.raises(ValueError):
                with tracing.trace_span("reconcile_child"):
                    raise ValueError("boom")

    def test_initialize_disabled(self, monkeypatch):
        """Test that OTEL_TRACES_ENABLED=false leaves tracing off."""
        monkeypatch.setenv("OTEL_TRACES_ENABLED", "false")
        with patch.object(tracing, "_tracer", None):
            tracing.initialize_tracing()
            assert tracing.get_tracer() is None
