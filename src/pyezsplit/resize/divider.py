# ---------------------------------------------------------------------------
# File: divider.py
# ---------------------------------------------------------------------------
# Description:
#	Divider drag state machine for pyezsplit.
#
# Notes:
#	- States: IDLE -> DRAGGING -> IDLE. A start while DRAGGING is ignored.
#	- Every frame is computed from the drag-start snapshot, never from the
#	  previous frame, so repeated moves cannot drift.
#	- px targets: collapse policy on the raw size (it clamps the rest).
#	  fr targets: the divider's redistribution policy.
#	- reset() is valid in any state and bypasses bounds and collapse.
#	- Geometry, style and input come in as capabilities (see capabilities.py).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Per-divider redistribution policy
# 01/15/2026	Paul G. LeDuc				Telemetry for drag lifecycle + saturation
# 01/17/2026	Paul G. LeDuc				px path: collapse sees the raw size
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from pyezsplit.core.logging import get_app_logger
from pyezsplit.core.telemetry import Telemetry, get_telemetry
from pyezsplit.resize.capabilities import GeometrySource, PointerEvent, SignalSource, StyleSink
from pyezsplit.resize.collapse import apply_collapse
from pyezsplit.resize.policy import RedistributionPolicy
from pyezsplit.resize.redistribute import flex_space_px, redistribute
from pyezsplit.resize.settings import ResizeSettings
from pyezsplit.resize.signs import axis_for, signed_delta
from pyezsplit.resize.track import Track, TrackSnapshot, Unit


log = get_app_logger("resize.divider")


class DragState(str, Enum):
	IDLE = "idle"
	DRAGGING = "dragging"


@dataclass(frozen=True, slots=True)
class DragSnapshot:
	"""
	Everything a drag needs, captured once at drag start.
	"""
	target: TrackSnapshot
	siblings: tuple[TrackSnapshot, ...]
	container_px: float
	flex_px: float
	pointer_start: float

	def fr_tracks(self) -> list[TrackSnapshot]:
		return [s for s in self.siblings if s.unit is Unit.FR and not s.is_divider]


class DividerController:
	"""
	DividerController

	Owns one divider: binds its start/reset signals on construction,
	runs the drag lifecycle, and writes sizes to the style sink.
	"""

	def __init__(
		self,
		divider: Track,
		target: Track,
		siblings: Sequence[Track],
		container: Track,
		*,
		geometry: GeometrySource,
		sink: StyleSink,
		signals: SignalSource,
		settings: Optional[ResizeSettings] = None,
		policy: RedistributionPolicy | str | None = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.divider = divider
		self.target = target
		self.siblings = list(siblings)
		self.container = container

		self.geometry = geometry
		self.sink = sink
		self.signals = signals

		self.settings = settings or ResizeSettings()
		self.policy = RedistributionPolicy.parse(
			policy or divider.policy or self.settings.default_policy
		)
		self._telemetry = telemetry

		self.axis = axis_for(container.direction)
		self.adjacent_id = self._find_adjacent_id()

		self._state = DragState.IDLE
		self._snapshot: Optional[DragSnapshot] = None

		self.signals.bind_divider(self.start_drag, self.reset)

	# -----------------------------------------------------------------------
	# State
	# -----------------------------------------------------------------------

	@property
	def state(self) -> DragState:
		return self._state

	@property
	def is_dragging(self) -> bool:
		return self._state is DragState.DRAGGING

	@property
	def snapshot(self) -> Optional[DragSnapshot]:
		return self._snapshot

	@property
	def telemetry(self) -> Telemetry:
		return self._telemetry or get_telemetry()

	# -----------------------------------------------------------------------
	# Signals
	# -----------------------------------------------------------------------

	def start_drag(self, event: PointerEvent) -> None:
		if self.is_dragging:
			log.debug("divider %s: start ignored, already dragging", self.divider.id)
			return

		self._snapshot = self._capture(event)
		self._state = DragState.DRAGGING

		self.signals.subscribe(self.drag, self.end_drag, self.cancel)
		self.signals.set_selection_enabled(False)

		log.debug(
			"divider %s: drag start target=%s size=%s flex_px=%s",
			self.divider.id,
			self.target.id,
			self._snapshot.target.size,
			self._snapshot.flex_px,
		)
		self.telemetry.event("divider.drag_start", self._attrs())

	def drag(self, event: PointerEvent) -> None:
		snapshot = self._snapshot
		if not self.is_dragging or snapshot is None:
			return

		self.apply_resize(event.coordinate(self.axis) - snapshot.pointer_start)

	def end_drag(self, event: Optional[PointerEvent] = None) -> None:
		if not self.is_dragging:
			return

		self._teardown()
		self.telemetry.event("divider.drag_end", self._attrs())

	def cancel(self) -> None:
		if not self.is_dragging:
			return

		self._teardown()
		self.telemetry.event("divider.drag_end", {**self._attrs(), "cancelled": True})

	def destroy(self) -> None:
		"""
		Host teardown: drop the divider's own bindings and any active drag.
		"""
		self.signals.unbind_divider()

		if self.is_dragging:
			self._teardown()

	# -----------------------------------------------------------------------
	# Resize
	# -----------------------------------------------------------------------

	def apply_resize(self, delta_px: float) -> dict[str, float]:
		"""
		Resize from the drag-start snapshot by a raw pointer delta.

		Returns the sizes written to the sink (empty when nothing changed).
		"""
		snapshot = self._snapshot
		if snapshot is None:
			return {}

		delta = signed_delta(delta_px, self.target.direction, self.divider.divider_position)

		with self.telemetry.timer("divider.resize_ms", self._attrs()):
			if self.target.unit is Unit.PX:
				return self._resize_px(snapshot, delta)
			return self._resize_fr(snapshot, delta)

	def _resize_px(self, snapshot: DragSnapshot, delta: float) -> dict[str, float]:
		before = snapshot.target.size
		size = apply_collapse(self.target, before + delta, before)

		self.sink.set_size(self.target.id, size, Unit.PX)
		return {self.target.id: size}

	def _resize_fr(self, snapshot: DragSnapshot, delta: float) -> dict[str, float]:
		result = redistribute(
			snapshot.target,
			snapshot.fr_tracks(),
			delta,
			snapshot.flex_px,
			policy=self.policy,
			settings=self.settings,
			adjacent_id=self.adjacent_id,
		)
		if result is None:
			return {}

		for track_id, share in result.sizes.items():
			self.sink.set_size(track_id, share, Unit.FR)

		if result.saturated:
			self.telemetry.counter(
				"divider.saturated",
				attrs={**self._attrs(), "dropped_shares": result.dropped_shares},
			)

		return dict(result.sizes)

	# -----------------------------------------------------------------------
	# Reset
	# -----------------------------------------------------------------------

	def reset(self) -> dict[str, float]:
		"""
		Write declared defaults to the target and to every sibling with a
		non-zero default. Bounds and collapse are not applied.
		"""
		written: dict[str, float] = {}

		self.sink.set_size(self.target.id, self.target.size_default, self.target.unit)
		written[self.target.id] = self.target.size_default

		for sibling in self.siblings:
			if sibling.id == self.target.id or not sibling.size_default:
				continue
			self.sink.set_size(sibling.id, sibling.size_default, sibling.unit)
			written[sibling.id] = sibling.size_default

		log.debug("divider %s: reset %s", self.divider.id, written)
		self.telemetry.event("divider.reset", self._attrs())
		return written

	# -----------------------------------------------------------------------
	# Internal helpers
	# -----------------------------------------------------------------------

	def _capture(self, event: PointerEvent) -> DragSnapshot:
		self.container.refresh(self.geometry)
		for sibling in self.siblings:
			sibling.refresh(self.geometry)
		if not any(s is self.target for s in self.siblings):
			self.target.refresh(self.geometry)

		siblings = tuple(s.snapshot() for s in self.siblings)

		return DragSnapshot(
			target=self.target.snapshot(),
			siblings=siblings,
			container_px=self.container.size_px,
			flex_px=flex_space_px(self.container.size_px, siblings),
			pointer_start=event.coordinate(self.axis),
		)

	def _teardown(self) -> None:
		self.signals.unsubscribe()
		self.signals.set_selection_enabled(True)
		self._snapshot = None
		self._state = DragState.IDLE

		log.debug("divider %s: drag end", self.divider.id)

	def _find_adjacent_id(self) -> Optional[str]:
		"""
		Nearest non-divider track on the far side of the divider from target.
		"""
		ids = [s.id for s in self.siblings]
		if self.divider.id not in ids or self.target.id not in ids:
			return None

		d = ids.index(self.divider.id)
		step = -1 if ids.index(self.target.id) > d else 1

		i = d + step
		while 0 <= i < len(self.siblings):
			if not self.siblings[i].is_divider:
				return self.siblings[i].id
			i += step
		return None

	def _attrs(self) -> dict[str, str]:
		return {
			"divider": self.divider.id,
			"target": self.target.id,
			"policy": self.policy.value,
		}

	def __repr__(self) -> str:
		return (
			f"<{self.__class__.__name__} divider={self.divider.id!r} "
			f"target={self.target.id!r} state={self._state.value}>"
		)
