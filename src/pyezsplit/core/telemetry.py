# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight telemetry subsystem for pyezsplit.
#
#   Provides a small, stable facade for emitting:
#     - events   (divider.drag_start, divider.drag_end, divider.reset)
#     - counters (divider.saturated)
#     - timers   (divider.resize_ms)
#
#   Backends are implemented as "sinks".
#
# Notes:
#   - Telemetry is optional and safe to call even when disabled.
#   - Default sink is NullSink (no-op).
#   - LogSink routes everything through the pyezsplit.app.telemetry logger.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Accept AppConfig in init_telemetry
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


# ---------------------------------------------------------------------------
# Telemetry data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any]


# ---------------------------------------------------------------------------
# Sink protocol
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sink implementations
# ---------------------------------------------------------------------------

class NullSink:
	"""
	No-op telemetry sink.
	"""

	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Telemetry sink that writes events and metrics to a logger at DEBUG.

	Drag frames arrive at pointer rate, so INFO would flood the console.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory telemetry sink for testing.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def metric_names(self) -> list[str]:
		return [m.name for m in self.metrics]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Telemetry facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade used by dividers and the Tk host.

	All methods are safe to call even when telemetry is disabled.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return

		self._sink.emit_event(
			TelemetryEvent(name=name, timestamp=time.time(), attrs=attrs or {})
		)

	def counter(
		self,
		name: str,
		value: int = 1,
		attrs: Optional[Dict[str, Any]] = None,
	) -> None:
		if not self._enabled:
			return

		self._sink.emit_metric(
			TelemetryMetric(name=name, value=float(value), attrs=attrs or {})
		)

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})


class _TelemetryTimer:
	"""
	Context manager that reports elapsed milliseconds as a counter.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start: float = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.counter(self._name, value=int(elapsed_ms), attrs=self._attrs)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> None:
	"""
	Initialize the global telemetry instance.

	Expected cfg keys (cfg is a dict or anything with .get):
		telemetry_enabled: bool
		telemetry_sink: "null" | "log"
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False))
	sink_name = cfg.get("telemetry_sink", "null")

	if not enabled:
		_telemetry = Telemetry(False, NullSink())
		return

	if sink_name == "log" and logger is not None:
		sink: TelemetrySink = LogSink(logger)
	else:
		sink = NullSink()

	_telemetry = Telemetry(enabled=True, sink=sink)


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance.
	Safe to call before init; returns a disabled telemetry instance.
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
