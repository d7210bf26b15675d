# ---------------------------------------------------------------------------
# File: memory.py
# ---------------------------------------------------------------------------
# Description:
#	In-memory capability adapters (style store, geometry, signals).
#
# Notes:
#	- Headless: no Tk dependency. Used by tests and by hosts that do their
#	  own rendering.
#	- MemoryGeometry.reflow() lays a line out from the store so several
#	  drags can be chained the way a real renderer would.
#	- MemorySignals lets a caller script press/move/release sequences.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/15/2026	Paul G. LeDuc				Add MemoryGeometry.reflow
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from pyezsplit.layout.values import format_size, parse_share, parse_size
from pyezsplit.resize.capabilities import EndHandler, Handler, PointerEvent, PointerHandler
from pyezsplit.resize.track import Direction, Rect, Track, Unit


# ---------------------------------------------------------------------------
# Style store
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class MemoryStyleStore:
	"""
	MemoryStyleStore

	Live size values keyed by track id. Last write wins.
	"""
	values: dict[str, str] = field(default_factory=dict)
	writes: list[tuple[str, float, Unit]] = field(default_factory=list)

	def set_size(self, track_id: str, value: float, unit: Unit) -> None:
		self.values[track_id] = format_size(value, unit)
		self.writes.append((track_id, float(value), unit))

	def get(self, track_id: str) -> Optional[str]:
		return self.values.get(track_id)

	def size(self, track_id: str) -> Optional[float]:
		parsed = parse_size(self.values.get(track_id))
		return None if parsed is None else parsed[0]

	def share(self, track_id: str) -> Optional[float]:
		return parse_share(self.values.get(track_id))

	def clear(self) -> None:
		self.values.clear()
		self.writes.clear()


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class MemoryGeometry:
	"""
	MemoryGeometry

	Static rects per track id, shares read from an optional store.
	Unknown ids measure as an empty rect (an unmapped widget).
	"""
	rects: dict[str, Rect] = field(default_factory=dict)
	store: Optional[MemoryStyleStore] = None

	def rect(self, track_id: str) -> Rect:
		return self.rects.get(track_id, Rect(0.0, 0.0, 0.0, 0.0))

	def share(self, track_id: str) -> Optional[float]:
		if self.store is None:
			return None
		return self.store.share(track_id)

	def set_rect(self, track_id: str, rect: Rect) -> None:
		self.rects[track_id] = rect

	def reflow(self, container: Track, tracks: Sequence[Track], *, cross: float = 100.0) -> None:
		"""
		Lay tracks out end to end inside container's current rect.

		px tracks take their stored px value (else their default); fr tracks
		split what is left by stored share (else default).
		"""
		outer = self.rect(container.id)
		start, _end, total = outer.span(container.direction)

		px_sizes: dict[str, float] = {}
		shares: dict[str, float] = {}

		for t in tracks:
			stored = self.store.get(t.id) if self.store is not None else None
			parsed = parse_size(stored)

			if t.unit is Unit.FR and not t.is_divider:
				value = parsed[0] if parsed is not None and parsed[1] is not Unit.PX else t.size_default
				shares[t.id] = value
			else:
				value = parsed[0] if parsed is not None and parsed[1] is not Unit.FR else t.size_default
				px_sizes[t.id] = value

		flex = max(0.0, total - sum(px_sizes.values()))
		total_shares = sum(shares.values())
		pps = flex / total_shares if total_shares > 0 else 0.0

		pos = start
		for t in tracks:
			size = px_sizes[t.id] if t.id in px_sizes else shares[t.id] * pps
			self.rects[t.id] = _rect_along(container.direction, pos, size, outer, cross)
			pos += size

	@classmethod
	def line(
		cls,
		container_id: str,
		direction: Direction,
		spans: Sequence[tuple[str, float]],
		*,
		store: Optional[MemoryStyleStore] = None,
		cross: float = 100.0,
	) -> "MemoryGeometry":
		"""
		Build geometry for one line: container plus (id, px) spans laid end to end.
		"""
		total = sum(px for _id, px in spans)
		outer = _rect_along(direction, 0.0, total, None, cross)

		geometry = cls(rects={container_id: outer}, store=store)
		pos = 0.0
		for track_id, px in spans:
			geometry.rects[track_id] = _rect_along(direction, pos, px, outer, cross)
			pos += px
		return geometry


def _rect_along(
	direction: Direction,
	start: float,
	size: float,
	outer: Optional[Rect],
	cross: float,
) -> Rect:
	if direction is Direction.ROW:
		left = outer.left if outer is not None else 0.0
		width = outer.width if outer is not None else cross
		return Rect(left=left, top=start, width=width, height=size)

	top = outer.top if outer is not None else 0.0
	height = outer.height if outer is not None else cross
	return Rect(left=start, top=top, width=size, height=height)


# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class MemorySignals:
	"""
	MemorySignals

	Scriptable signal source: press/move/release/escape/double_activate
	call whatever the divider has bound or subscribed.
	"""
	on_start: Optional[PointerHandler] = None
	on_reset: Optional[Handler] = None
	on_move: Optional[PointerHandler] = None
	on_end: Optional[EndHandler] = None
	on_cancel: Optional[Handler] = None
	selection_enabled: bool = True

	# Wiring (SignalSource)

	def bind_divider(self, on_start: PointerHandler, on_reset: Handler) -> None:
		self.on_start = on_start
		self.on_reset = on_reset

	def unbind_divider(self) -> None:
		self.on_start = None
		self.on_reset = None

	def subscribe(self, on_move: PointerHandler, on_end: EndHandler, on_cancel: Handler) -> None:
		self.on_move = on_move
		self.on_end = on_end
		self.on_cancel = on_cancel

	def unsubscribe(self) -> None:
		self.on_move = None
		self.on_end = None
		self.on_cancel = None

	def set_selection_enabled(self, enabled: bool) -> None:
		self.selection_enabled = enabled

	@property
	def bound(self) -> bool:
		return self.on_start is not None

	@property
	def subscribed(self) -> bool:
		return self.on_move is not None

	# Scripting

	def press(self, x: float = 0.0, y: float = 0.0) -> None:
		if self.on_start is not None:
			self.on_start(PointerEvent(x, y))

	def move(self, x: float = 0.0, y: float = 0.0) -> None:
		if self.on_move is not None:
			self.on_move(PointerEvent(x, y))

	def release(self, x: float = 0.0, y: float = 0.0) -> None:
		if self.on_end is not None:
			self.on_end(PointerEvent(x, y))

	def escape(self) -> None:
		if self.on_cancel is not None:
			self.on_cancel()

	def double_activate(self) -> None:
		if self.on_reset is not None:
			self.on_reset()
