# ---------------------------------------------------------------------------
# File: capabilities.py
# ---------------------------------------------------------------------------
# Description:
#	Host capabilities the resize core calls (geometry, style, input).
#
# Notes:
#	- The core never touches a toolkit directly; Tk and in-memory adapters
#	  implement these protocols.
#	- Signals carry a single PointerEvent; how they were produced (mouse,
#	  touch, tests) does not matter here.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable

from pyezsplit.resize.signs import Axis
from pyezsplit.resize.track import Rect, Unit


@dataclass(frozen=True, slots=True)
class PointerEvent:
	"""
	Pointer position in screen pixels.
	"""
	x: float = 0.0
	y: float = 0.0

	def coordinate(self, axis: Axis) -> float:
		return self.y if axis == "y" else self.x


PointerHandler = Callable[[PointerEvent], None]
EndHandler = Callable[[Optional[PointerEvent]], None]
Handler = Callable[[], None]


@runtime_checkable
class GeometrySource(Protocol):
	"""
	Live geometry + share lookup.
	"""

	def rect(self, track_id: str) -> Rect: ...

	def share(self, track_id: str) -> Optional[float]:
		"""
		Current fr share for a track, or None if unset/unparsable.
		"""
		...


@runtime_checkable
class StyleSink(Protocol):
	"""
	Receives computed sizes. Last write per track id wins.
	"""

	def set_size(self, track_id: str, value: float, unit: Unit) -> None: ...


@runtime_checkable
class SignalSource(Protocol):
	"""
	Input signals for one divider.

	bind_divider/unbind_divider cover the divider's own start + reset
	signals for its whole life. subscribe/unsubscribe cover the global
	move/end/cancel signals for the length of one drag.
	"""

	def bind_divider(self, on_start: PointerHandler, on_reset: Handler) -> None: ...

	def unbind_divider(self) -> None: ...

	def subscribe(self, on_move: PointerHandler, on_end: EndHandler, on_cancel: Handler) -> None: ...

	def unsubscribe(self) -> None: ...

	def set_selection_enabled(self, enabled: bool) -> None: ...
