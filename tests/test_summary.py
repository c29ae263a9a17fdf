# ============================================================================
# ENDPOINT SUMMARY TESTS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Tests - Endpoint inventory logging
# PURPOSE: Verify change-triggered summaries and reload batch handling
# CREATED: 18 OCT 2026
# ============================================================================
"""
Endpoint Summary Tests

Run with:
    pytest tests/test_summary.py -v
"""

import logging
import threading

import pytest
from unittest.mock import MagicMock

from server.endpoints import EndpointRegistry
from server.events import (
    ContextStartedEvent,
    ContextStoppingEvent,
    LifecycleEventBus,
    RouteReloadedEvent,
)
from server.summary import SUMMARY_HEADER, EndpointSummaryLogger


# ============================================================================
# HELPERS
# ============================================================================

def _make_summary(*paths, port=8080):
    endpoints = EndpointRegistry()
    for path in paths:
        endpoints.add_http_endpoint(path)
    bus = LifecycleEventBus()
    summary = EndpointSummaryLogger(endpoints, port)
    summary.subscribe(bus)
    return summary, endpoints, bus


def _summary_lines(caplog):
    return [
        r.getMessage() for r in caplog.records
        if r.name == "server.summary"
    ]


@pytest.fixture
def summary_log(caplog):
    caplog.set_level(logging.INFO, logger="server.summary")
    return caplog


# ============================================================================
# EVALUATION
# ============================================================================

class TestEvaluation:
    """Tests for EndpointSummaryLogger.evaluate()."""

    def test_logs_inventory(self, summary_log):
        summary, _, bus = _make_summary("/health", "/dev", port=9090)
        bus.publish(ContextStartedEvent())

        assert _summary_lines(summary_log) == [
            SUMMARY_HEADER,
            "    http://0.0.0.0:9090/dev",
            "    http://0.0.0.0:9090/health",
        ]
        assert summary.last_logged == {"/health", "/dev"}

    def test_empty_inventory_logs_nothing(self, summary_log):
        summary, _, _ = _make_summary()

        assert summary.evaluate() is False
        assert _summary_lines(summary_log) == []
        assert summary.last_logged is None

    def test_unchanged_inventory_logs_once(self, summary_log):
        summary, _, _ = _make_summary("/health", "/dev")

        assert summary.evaluate() is True
        assert summary.evaluate() is False
        assert _summary_lines(summary_log).count(SUMMARY_HEADER) == 1

    def test_same_set_different_insertion_order(self, summary_log):
        first, _, _ = _make_summary("/health", "/dev")
        first.evaluate()

        reordered = EndpointRegistry()
        reordered.add_http_endpoint("/dev")
        reordered.add_http_endpoint("/health")
        first.endpoints = reordered

        assert first.evaluate() is False

    def test_new_endpoint_logs_again(self, summary_log):
        summary, endpoints, _ = _make_summary("/health")
        summary.evaluate()

        endpoints.add_http_endpoint("/dev")
        assert summary.evaluate() is True
        assert summary.last_logged == {"/health", "/dev"}
        assert _summary_lines(summary_log).count(SUMMARY_HEADER) == 2

    def test_snapshot_is_a_copy(self):
        summary, endpoints, _ = _make_summary("/health")
        summary.evaluate()
        endpoints.add_http_endpoint("/dev")

        assert summary.last_logged == {"/health"}


class _StalledEndpoints(EndpointRegistry):
    """Inventory whose first snapshot waits until released."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()
        self._calls = 0

    def get_http_endpoints(self):
        snapshot = super().get_http_endpoints()
        self._calls += 1
        if self._calls == 1:
            self.entered.set()
            self.release.wait(timeout=5)
        return snapshot


class TestConcurrentEvaluation:
    """Overlapping evaluations never report an older inventory last."""

    def test_stale_snapshot_not_logged_after_newer(self, summary_log):
        endpoints = _StalledEndpoints()
        endpoints.add_http_endpoint("/dev")
        summary = EndpointSummaryLogger(endpoints, 8080)

        first = threading.Thread(target=summary.evaluate)
        first.start()
        assert endpoints.entered.wait(timeout=5)

        endpoints.add_http_endpoint("/health")
        second = threading.Thread(target=summary.evaluate)
        second.start()
        second.join(timeout=0.2)

        endpoints.release.set()
        first.join(timeout=5)
        second.join(timeout=5)

        assert summary.last_logged == {"/dev", "/health"}
        lines = _summary_lines(summary_log)
        assert lines[-3:] == [
            SUMMARY_HEADER,
            "    http://0.0.0.0:8080/dev",
            "    http://0.0.0.0:8080/health",
        ]
        assert summary.evaluate() is False


# ============================================================================
# EVENTS
# ============================================================================

class TestEvents:
    """Which lifecycle events trigger an evaluation."""

    def test_only_last_event_of_batch_evaluates(self):
        summary, _, bus = _make_summary("/health")
        summary.evaluate = MagicMock(return_value=True)

        for index in (1, 0, 2):
            bus.publish(RouteReloadedEvent(index=index, total=3))
            if index != 2:
                summary.evaluate.assert_not_called()

        summary.evaluate.assert_called_once_with()

    def test_batch_logs_once(self, summary_log):
        _, _, bus = _make_summary("/health", "/dev")
        for index in range(3):
            bus.publish(RouteReloadedEvent(index=index, total=3, route_id=f"route{index}"))

        assert _summary_lines(summary_log).count(SUMMARY_HEADER) == 1

    def test_single_reload_evaluates(self):
        summary, _, bus = _make_summary("/health")
        bus.publish(RouteReloadedEvent(index=0, total=1))
        assert summary.last_logged == {"/health"}

    def test_stopping_event_ignored(self):
        summary, _, bus = _make_summary("/health")
        bus.publish(ContextStoppingEvent())
        assert summary.last_logged is None

    def test_reload_after_start_without_change_is_quiet(self, summary_log):
        _, _, bus = _make_summary("/health")
        bus.publish(ContextStartedEvent())
        bus.publish(RouteReloadedEvent(index=0, total=1))

        assert _summary_lines(summary_log).count(SUMMARY_HEADER) == 1


# ============================================================================
# EVENT BUS
# ============================================================================

class TestLifecycleEventBus:
    """Tests for LifecycleEventBus."""

    def test_filters_by_type(self):
        bus = LifecycleEventBus()
        handler = MagicMock()
        bus.subscribe(handler, ContextStartedEvent)

        bus.publish(RouteReloadedEvent(index=0, total=1))
        handler.assert_not_called()

        event = ContextStartedEvent()
        bus.publish(event)
        handler.assert_called_once_with(event)

    def test_no_types_receives_everything(self):
        bus = LifecycleEventBus()
        handler = MagicMock()
        bus.subscribe(handler)

        bus.publish(ContextStartedEvent())
        bus.publish(ContextStoppingEvent())
        assert handler.call_count == 2

    def test_failing_handler_does_not_stop_delivery(self, caplog):
        bus = LifecycleEventBus()
        after = MagicMock()
        bus.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        bus.subscribe(after)

        with caplog.at_level(logging.ERROR, logger="server.events"):
            bus.publish(ContextStartedEvent())

        after.assert_called_once()
        assert any("failed on ContextStartedEvent" in r.getMessage() for r in caplog.records)

    def test_unsubscribe(self):
        bus = LifecycleEventBus()
        handler = MagicMock()
        unsubscribe = bus.subscribe(handler)

        unsubscribe()
        bus.publish(ContextStartedEvent())

        handler.assert_not_called()
        assert len(bus) == 0
