# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   Themed Tk window hosting a pyezsplit layout.
#
# Notes:
#   - Owns config, logging/telemetry init, the ttk theme and one SplitView.
#   - cfg keys: "theme" (ttkthemes name, default "arc"), "reset_keyseq"
#     (default "<Control-r>"), plus the logging/telemetry/resize keys.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial coding / release
# 01/17/2026	Paul G. LeDuc				Apply ttkthemes theme from cfg
# 01/17/2026	Paul G. LeDuc				Bind reset-all key
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Mapping, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedStyle

from pyezsplit.core.config import AppConfig
from pyezsplit.core.logging import get_app_logger, init_logging
from pyezsplit.core.telemetry import get_telemetry, init_telemetry
from pyezsplit.layout.tree import LayoutTree
from pyezsplit.resize.settings import ResizeSettings
from pyezsplit.ui.splitview import SplitView


log = get_app_logger()

DEFAULT_THEME = "arc"


class App(tk.Tk):
	"""
	App

	Main application window for pyezsplit.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(cfg)
		init_logging(self.cfg)
		init_telemetry(self.cfg, logger=get_app_logger("telemetry"))

		self.settings = ResizeSettings.from_cfg(self.cfg)

		self.title_text = title or "pyezsplit"
		self.title(self.title_text)

		self.style = ThemedStyle(self)
		self._apply_theme(str(self.cfg.get("theme", DEFAULT_THEME)))

		self.view: Optional[SplitView] = None

		# Ensure Tk has computed screen dimensions
		self.update_idletasks()
		self._apply_geometry(width, height)

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.bind(str(self.cfg.get("reset_keyseq", "<Control-r>")), lambda e: self.reset_layout())

	# -----------------------------------------------------------------------
	# Layout
	# -----------------------------------------------------------------------

	def set_layout(self, layout: LayoutTree | Mapping[str, Any]) -> SplitView:
		"""
		Replace the current layout. Accepts a LayoutTree or its dict form.
		"""
		tree = layout if isinstance(layout, LayoutTree) else LayoutTree.from_dict(layout)

		if self.view is not None:
			self.view.destroy()

		self.view = SplitView(tree, settings=self.settings, telemetry=get_telemetry())
		self.view.mount(self.root_frame)
		return self.view

	def reset_layout(self) -> None:
		if self.view is not None:
			self.view.reset_all()

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_theme(self, name: str) -> None:
		try:
			self.style.set_theme(name)
		except tk.TclError:
			log.warning("Unknown ttk theme %r; keeping %r", name, self.style.theme_use())

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		if width is None and height is None:
			win_w = screen_w
			win_h = screen_h
		else:
			req_w = width if width is not None else screen_w
			req_h = height if height is not None else screen_h

			win_w = max(1, min(req_w, screen_w))
			win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Run the Tk event loop.
		"""
		self.mainloop()

	def destroy(self) -> None:
		if self.view is not None:
			self.view.destroy()
			self.view = None
		super().destroy()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
