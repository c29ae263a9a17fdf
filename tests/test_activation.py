# ============================================================================
# FEATURE ACTIVATION TESTS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Tests - One-time feature activation
# PURPOSE: Verify ActivationGate runs setup exactly once and wraps failures
# CREATED: 18 OCT 2026
# ============================================================================
"""
Feature Activation Tests

Run with:
    pytest tests/test_activation.py -v
"""

import threading
import time

import pytest
from unittest.mock import MagicMock

from server.activation import ActivationError, ActivationGate, Feature


class TestActivationGate:
    """Tests for ActivationGate.activate()."""

    def test_first_call_runs_setup(self):
        gate = ActivationGate()
        setup = MagicMock()

        assert gate.activate(Feature.HEALTH, setup) is True
        setup.assert_called_once_with()
        assert gate.is_activated(Feature.HEALTH)

    def test_repeated_calls_are_noops(self):
        gate = ActivationGate()
        first = MagicMock()
        later = MagicMock()

        gate.activate(Feature.CONSOLE, first)
        assert gate.activate(Feature.CONSOLE, later) is False
        assert gate.activate(Feature.CONSOLE, later) is False

        first.assert_called_once_with()
        later.assert_not_called()

    def test_features_are_independent(self):
        gate = ActivationGate()
        gate.activate(Feature.SERVER, MagicMock())

        assert gate.is_activated(Feature.SERVER)
        assert not gate.is_activated(Feature.CONSOLE)
        assert not gate.is_activated(Feature.HEALTH)

    def test_gates_are_independent(self):
        a = ActivationGate()
        b = ActivationGate()
        a.activate(Feature.SERVER, MagicMock())

        assert not b.is_activated(Feature.SERVER)

    def test_concurrent_callers_run_setup_once(self):
        gate = ActivationGate()
        calls = []
        calls_lock = threading.Lock()
        start = threading.Barrier(8)

        def setup():
            time.sleep(0.05)
            with calls_lock:
                calls.append(threading.get_ident())

        winners = []

        def attempt():
            start.wait()
            if gate.activate(Feature.SERVER, setup):
                winners.append(threading.get_ident())

        threads = [threading.Thread(target=attempt) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert winners == calls


class TestActivationFailure:
    """Tests for setup failures."""

    def test_failure_is_wrapped_and_chained(self):
        gate = ActivationGate()
        cause = OSError("port in use")

        with pytest.raises(ActivationError) as exc_info:
            gate.activate(Feature.SERVER, MagicMock(side_effect=cause))

        assert exc_info.value.feature == Feature.SERVER
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert "port in use" in str(exc_info.value)
        assert isinstance(exc_info.value, RuntimeError)

    def test_failed_feature_is_not_retried(self):
        gate = ActivationGate()
        with pytest.raises(ActivationError):
            gate.activate(Feature.HEALTH, MagicMock(side_effect=ValueError("boom")))

        retry = MagicMock()
        assert gate.activate(Feature.HEALTH, retry) is False
        retry.assert_not_called()
        assert gate.is_activated(Feature.HEALTH)
