"""Tests for rate limiting utilities."""

from __future__ import annotations

import time
from unittest.mock import patch

from kubernetes.client.exceptions import ApiException

from child_reconciler.utils.rate_limit import is_rate_limit_error, rate_limit_k8s


class TestRateLimitK8s:
    """Test cases for Kubernetes API rate limiting."""

    def test_rate_limit_k8s_decorator(self):
        """Test that k8s rate limiting decorator works."""
        call_count = 0

        @rate_limit_k8s
        def test_func():
            nonlocal call_count
            call_count += 1
            return "success"

        assert test_func() == "success"
        assert call_count == 1

    def test_rate_limit_k8s_with_args(self):
        """Test rate limiting with function arguments."""
        @rate_limit_k8s
        def test_func(a, b, c=None):
            return f"{a}-{b}-{c}"

        assert test_func("x", "y", c="z") == "x-y-z"

    @patch("child_reconciler.utils.rate_limit._K8S_RATE_LIMIT_PER_SECOND", 20.0)
    def test_rate_limit_k8s_enforces_rate(self):
        """Test that rate limiting enforces minimum interval."""
        call_times = []

        @rate_limit_k8s
        def test_func():
            call_times.append(time.time())

        test_func()
        test_func()

        # 1/20 s minimum interval, with a little slack for timer resolution
        assert call_times[1] - call_times[0] >= 0.045

    def test_rate_limit_propagates_exceptions(self):
        """Test that the wrapped function's errors are not swallowed."""
        @rate_limit_k8s
        def test_func():
            raise ApiException(status=500)

        try:
            test_func()
        except ApiException as e:
            assert e.status == 500
        else:
            raise AssertionError("ApiException not raised")


class TestIsRateLimitError:
    """Test cases for is_rate_limit_error function."""

    def test_429(self):
        """Test that HTTP 429 is a rate limit error."""
        assert is_rate_limit_error(ApiException(status=429, reason="Too Many Requests"))

    def test_503_with_rate_limit_message(self):
        """Test that 503 mentioning rate limit is a rate limit error."""
        assert is_rate_limit_error(ApiException(status=503, reason="rate limit exceeded"))

    def test_plain_503(self):
        """Test that other 503s are not rate limit errors."""
        assert not is_rate_limit_error(ApiException(status=503, reason="Service Unavailable"))

    def test_other_status(self):
        """Test that 404 is not a rate limit error."""
        assert not is_rate_limit_error(ApiException(status=404, reason="Not Found"))

    def test_non_api_exception(self):
        """Test that non-API errors are not rate limit errors."""
        assert not is_rate_limit_error(RuntimeError("429"))
