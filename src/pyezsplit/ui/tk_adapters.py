# ---------------------------------------------------------------------------
# File: tk_adapters.py
# ---------------------------------------------------------------------------
# Description:
#	Tkinter implementations of the resize capabilities.
#
# Notes:
#	- TkStyleStore keeps text values (like MemoryStyleStore) and pushes
#	  each write into the owning grid:
#		px -> minsize=<px>, weight=0
#		fr -> weight=<share * FR_WEIGHT_SCALE>, uniform group "fr"
#	  Tk weights are ints, hence the scale.
#	- TkGeometry measures with winfo_*; call update_idletasks() before a
#	  drag so the numbers are real (the first drag otherwise "jumps").
#	- TkSignals binds the divider's own press/double-click and, while a
#	  drag runs, app-wide motion/release/Escape via bind_all.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import tkinter as tk

from pyezsplit.core.logging import get_app_logger
from pyezsplit.layout.values import format_size, parse_share
from pyezsplit.resize.capabilities import EndHandler, Handler, PointerEvent, PointerHandler
from pyezsplit.resize.track import Direction, Rect, Unit


log = get_app_logger("resize.tk")

FR_WEIGHT_SCALE = 1000
FR_UNIFORM_GROUP = "fr"


def _pointer(event: tk.Event) -> PointerEvent:
	return PointerEvent(
		x=float(getattr(event, "x_root", 0)),
		y=float(getattr(event, "y_root", 0)),
	)


# ---------------------------------------------------------------------------
# Style store
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GridSlot:
	"""
	Where a track lives: its parent grid, cell index and the parent's axis.
	"""
	container: tk.Misc
	index: int
	direction: Direction


@dataclass(slots=True)
class TkStyleStore:
	"""
	TkStyleStore

	Live size values keyed by track id, applied to grid row/column config.
	"""
	slots: dict[str, GridSlot] = field(default_factory=dict)
	values: dict[str, str] = field(default_factory=dict)

	def register(self, track_id: str, slot: GridSlot) -> None:
		self.slots[track_id] = slot

	def set_size(self, track_id: str, value: float, unit: Unit) -> None:
		self.values[track_id] = format_size(value, unit)

		slot = self.slots.get(track_id)
		if slot is None:
			log.debug("set_size: no grid slot for %s", track_id)
			return

		configure = (
			slot.container.rowconfigure
			if slot.direction is Direction.ROW
			else slot.container.columnconfigure
		)

		if unit is Unit.PX:
			configure(slot.index, minsize=max(0, int(round(value))), weight=0, uniform="")
		else:
			configure(
				slot.index,
				minsize=0,
				weight=max(0, int(round(value * FR_WEIGHT_SCALE))),
				uniform=FR_UNIFORM_GROUP,
			)

	def get(self, track_id: str) -> Optional[str]:
		return self.values.get(track_id)

	def share(self, track_id: str) -> Optional[float]:
		return parse_share(self.values.get(track_id))


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TkGeometry:
	"""
	TkGeometry

	Screen rects from live widgets; shares from the TkStyleStore.
	"""
	store: TkStyleStore
	widgets: dict[str, tk.Widget] = field(default_factory=dict)

	def register(self, track_id: str, widget: tk.Widget) -> None:
		self.widgets[track_id] = widget

	def rect(self, track_id: str) -> Rect:
		widget = self.widgets.get(track_id)
		if widget is None:
			return Rect(0.0, 0.0, 0.0, 0.0)

		return Rect(
			left=float(widget.winfo_rootx()),
			top=float(widget.winfo_rooty()),
			width=float(widget.winfo_width()),
			height=float(widget.winfo_height()),
		)

	def share(self, track_id: str) -> Optional[float]:
		return self.store.share(track_id)


# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------

_DRAG_SEQUENCES = ("<B1-Motion>", "<ButtonRelease-1>", "<Escape>")


@dataclass(slots=True)
class TkSignals:
	"""
	TkSignals

	Signal source for one divider widget.
	"""
	widget: tk.Widget
	cursor: str = "sb_h_double_arrow"
	color: str = "#C8C8C8"
	active_color: str = "#9E9E9E"

	_divider_bindings: list[tuple[str, str]] = field(default_factory=list, init=False, repr=False)
	_subscribed: bool = field(default=False, init=False, repr=False)

	def bind_divider(self, on_start: PointerHandler, on_reset: Handler) -> None:
		self.unbind_divider()

		def _on_press(event: tk.Event) -> None:
			# Geometry must be real before the drag snapshot is taken
			self.widget.update_idletasks()
			on_start(_pointer(event))

		press = self.widget.bind("<Button-1>", _on_press)
		double = self.widget.bind("<Double-Button-1>", lambda e: on_reset())
		self._divider_bindings = [("<Button-1>", press), ("<Double-Button-1>", double)]

	def unbind_divider(self) -> None:
		for sequence, funcid in self._divider_bindings:
			try:
				self.widget.unbind(sequence, funcid)
			except tk.TclError:
				# Widget already destroyed
				pass
		self._divider_bindings = []

	def subscribe(self, on_move: PointerHandler, on_end: EndHandler, on_cancel: Handler) -> None:
		self.widget.bind_all("<B1-Motion>", lambda e: on_move(_pointer(e)))
		self.widget.bind_all("<ButtonRelease-1>", lambda e: on_end(_pointer(e)))
		self.widget.bind_all("<Escape>", lambda e: on_cancel())
		self._subscribed = True

	def unsubscribe(self) -> None:
		if not self._subscribed:
			return

		for sequence in _DRAG_SEQUENCES:
			try:
				self.widget.unbind_all(sequence)
			except tk.TclError:
				pass
		self._subscribed = False

	def set_selection_enabled(self, enabled: bool) -> None:
		"""
		Tk has no document-wide selection to suppress; hold the resize
		cursor on the toplevel and highlight the divider instead.
		"""
		try:
			top = self.widget.winfo_toplevel()
			top.configure(cursor="" if enabled else self.cursor)
			self.widget.configure(bg=self.color if enabled else self.active_color)
		except tk.TclError:
			pass
