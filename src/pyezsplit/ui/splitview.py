# ---------------------------------------------------------------------------
# File: splitview.py
# ---------------------------------------------------------------------------
# Description:
#	SplitView: builds a Tk widget tree from a LayoutTree and mounts a
#	DividerController on every divider.
#
# Notes:
#	- Groups are grid containers. A "column" group lays children out
#	  side by side; a "row" group stacks them.
#	- Panes and nested groups do not propagate their requested size, so
#	  the grid config written by TkStyleStore alone decides track sizes.
#	- Declared defaults are written once at mount; after that the store
#	  is the source of truth.
#	- A divider that fails to mount stays inert; the rest still work.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial coding / release (from MainLayout)
# 01/17/2026	Paul G. LeDuc				Skip tracks with bad options instead of failing the view
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import tkinter as tk
from tkinter import ttk

from pyezsplit.core.logging import get_app_logger
from pyezsplit.core.telemetry import Telemetry
from pyezsplit.layout.tree import LayoutNode, LayoutTree
from pyezsplit.resize.divider import DividerController
from pyezsplit.resize.errors import ConfigurationError
from pyezsplit.resize.mount import mount_dividers
from pyezsplit.resize.settings import ResizeSettings
from pyezsplit.resize.track import Direction, Track
from pyezsplit.ui.tk_adapters import GridSlot, TkGeometry, TkSignals, TkStyleStore


log = get_app_logger("ui.splitview")

_CURSORS: dict[Direction, str] = {
	Direction.COLUMN: "sb_h_double_arrow",
	Direction.ROW: "sb_v_double_arrow",
}


@dataclass(slots=True)
class SplitView:
	tree: LayoutTree
	settings: Optional[ResizeSettings] = None
	telemetry: Optional[Telemetry] = None

	bg: str = "#FFFFFF"
	splitter_color: str = "#C8C8C8"
	active_color: str = "#9E9E9E"
	show_labels: bool = True

	# Internal widgets
	root: tk.Frame | None = field(default=None, init=False, repr=False)
	widgets: dict[str, tk.Widget] = field(default_factory=dict, init=False, repr=False)

	# Capabilities
	store: TkStyleStore = field(default_factory=TkStyleStore, init=False, repr=False)
	geometry: TkGeometry | None = field(default=None, init=False, repr=False)

	dividers: list[DividerController] = field(default_factory=list, init=False, repr=False)
	_directions: dict[str, Direction] = field(default_factory=dict, init=False, repr=False)

	def mount(self, parent: tk.Misc) -> tk.Frame:
		if not self.tree.root.is_group:
			raise ConfigurationError(f"Layout root must be a group, got {self.tree.root.type!r}")

		self.geometry = TkGeometry(self.store)

		root = self._build_group(self.tree.root, parent, nested=False)
		self.root = root

		self._apply_defaults()

		self.dividers = mount_dividers(
			self.tree,
			geometry=self.geometry,
			sink=self.store,
			signals_for=self._signals_for,
			settings=self.settings,
			telemetry=self.telemetry,
		)
		log.info("SplitView mounted: %d divider(s)", len(self.dividers))

		# Ensure geometry is computed before first drag
		root.after_idle(self._prime_geometry)

		root.pack(fill="both", expand=True)
		return root

	# -----------------------------------------------------------------------
	# Public API
	# -----------------------------------------------------------------------

	def controller(self, divider_id: str) -> Optional[DividerController]:
		return next((c for c in self.dividers if c.divider.id == divider_id), None)

	def reset_all(self) -> None:
		for controller in self.dividers:
			controller.reset()

	def destroy(self) -> None:
		for controller in self.dividers:
			controller.destroy()
		self.dividers = []

		if self.root is not None:
			self.root.destroy()
			self.root = None

		self.widgets.clear()

	# -----------------------------------------------------------------------
	# Build
	# -----------------------------------------------------------------------

	def _build_group(self, node: LayoutNode, parent: tk.Misc, *, nested: bool = True) -> tk.Frame:
		frame = tk.Frame(parent, bg=self.bg, width=1, height=1)
		if nested:
			frame.grid_propagate(False)

		direction = self._direction_of(node)
		self._register(node, frame)

		for index, child in enumerate(node.children):
			widget = self._build_node(child, frame, direction)

			if direction is Direction.ROW:
				widget.grid(row=index, column=0, sticky="nsew")
			else:
				widget.grid(row=0, column=index, sticky="nsew")

			if child.id:
				self.store.register(child.id, GridSlot(frame, index, direction))
				self._directions[child.id] = direction

		# Cross axis fills
		if direction is Direction.ROW:
			frame.columnconfigure(0, weight=1)
		else:
			frame.rowconfigure(0, weight=1)

		return frame

	def _build_node(self, node: LayoutNode, parent: tk.Frame, direction: Direction) -> tk.Widget:
		if node.is_group:
			return self._build_group(node, parent)

		if node.is_divider:
			widget: tk.Widget = tk.Frame(
				parent,
				bg=self.splitter_color,
				width=1,
				height=1,
				cursor=_CURSORS[direction],
			)
			self._register(node, widget)
			return widget

		pane = ttk.Frame(parent, width=1, height=1)
		pane.pack_propagate(False)
		if self.show_labels and node.id:
			ttk.Label(pane, text=str(node.options.get("label") or node.id)).pack(padx=6, pady=6)

		self._register(node, pane)
		return pane

	def _register(self, node: LayoutNode, widget: tk.Widget) -> None:
		if not node.id:
			return
		self.widgets[node.id] = widget
		if self.geometry is not None:
			self.geometry.register(node.id, widget)

	def _apply_defaults(self) -> None:
		for node in self.tree.walk():
			if not node.id or node is self.tree.root:
				continue

			try:
				track = Track.from_options(node.options)
			except ConfigurationError as ex:
				log.error("Skipping default size for %r: %s", node.id, ex)
				continue

			if track.size_default:
				self.store.set_size(track.id, track.size_default, track.unit)

	def _signals_for(self, divider_id: str) -> TkSignals:
		direction = self._directions.get(divider_id, Direction.COLUMN)
		return TkSignals(
			self.widgets[divider_id],
			cursor=_CURSORS[direction],
			color=self.splitter_color,
			active_color=self.active_color,
		)

	def _direction_of(self, node: LayoutNode) -> Direction:
		raw = str(node.options.get("direction") or Direction.COLUMN.value).strip().lower()
		try:
			return Direction(raw)
		except ValueError:
			log.error("Group %r: unknown direction %r; using column", node.id, raw)
			return Direction.COLUMN

	def _prime_geometry(self) -> None:
		"""
		Force Tk to compute widget sizes so the first drag doesn't "jump".
		"""
		if self.root is not None:
			try:
				self.root.update_idletasks()
			except tk.TclError:
				pass
