# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyezsplit.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial tests
# 01/14/2026	Paul G. LeDuc				LogSink + AppConfig init
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pyezsplit.core.config import AppConfig
from pyezsplit.core.telemetry import (
	LogSink,
	MemorySink,
	NullSink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)


@pytest.fixture(autouse=True)
def _disabled_global_telemetry():
	yield
	init_telemetry({})


def test_telemetry_disabled_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("divider.drag_start", {"divider": "d1"})
	t.counter("divider.saturated", 3, {"divider": "d1"})

	with t.timer("divider.resize_ms", {"divider": "d1"}):
		pass

	assert not t.enabled
	assert sink.events == []
	assert sink.metrics == []


def test_telemetry_event_emits_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("divider.reset", {"target": "side"})

	assert sink.event_names() == ["divider.reset"]
	ev = sink.events[0]
	assert ev.attrs == {"target": "side"}

	# slots=True dataclasses don't have __dict__
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_telemetry_counter_emits_metric_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("divider.saturated", 2, {"divider": "d1"})

	m = sink.metrics[0]
	assert m.name == "divider.saturated"
	assert m.value == 2.0
	assert m.attrs["divider"] == "d1"


def test_telemetry_timer_emits_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("divider.resize_ms", {"divider": "d1"}):
		pass

	assert sink.metric_names() == ["divider.resize_ms"]
	assert sink.metrics[0].value >= 0.0


def test_memorysink_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("x")
	t.counter("y")
	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_nullsink_accepts_everything():
	t = Telemetry(enabled=True, sink=NullSink())

	t.event("x")
	t.counter("y")


def test_logsink_writes_debug_records(caplog):
	logger = logging.getLogger("pyezsplit.app.telemetry")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.DEBUG, logger="pyezsplit.app.telemetry"):
		t.event("divider.drag_start", {"divider": "d1"})
		t.counter("divider.saturated")

	assert "name=divider.drag_start" in caplog.text
	assert "name=divider.saturated" in caplog.text
	assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_get_telemetry_safe_before_init_returns_telemetry():
	t = get_telemetry()

	t.event("should.not.raise")
	t.counter("should.not.raise", 1)

	assert isinstance(t, Telemetry)


def test_init_telemetry_disabled_sets_global_noop():
	init_telemetry({"telemetry_enabled": False})

	assert not get_telemetry().enabled


def test_init_telemetry_accepts_appconfig():
	init_telemetry(AppConfig({"telemetry_enabled": True}))

	assert get_telemetry().enabled


def test_init_telemetry_log_sink_routes_to_logger(caplog):
	logger = logging.getLogger("pyezsplit.app.telemetry")
	init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"}, logger=logger)

	with caplog.at_level(logging.DEBUG, logger="pyezsplit.app.telemetry"):
		get_telemetry().event("divider.reset")

	assert "divider.reset" in caplog.text


def test_init_telemetry_enabled_without_logger_uses_nullsink():
	init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"}, logger=None)

	t = get_telemetry()
	assert t.enabled
	t.event("enabled.nullsink")
