# ---------------------------------------------------------------------------
# File: resize/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public surface of the pyezsplit resize core.
#
# Notes:
#   - Uses lazy exports (PEP 562) so importing one submodule does not pull
#     in the rest, and core <-> resize imports stay acyclic.
#   - The core is toolkit-agnostic; nothing here imports tkinter.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Model
	"Track", "TrackSnapshot", "Rect", "Role", "Unit", "Direction", "DividerPosition",

	# Policies
	"invert", "signed_delta", "axis_for",
	"apply_collapse",
	"RedistributionPolicy", "Redistribution", "redistribute",
	"redistribute_line", "redistribute_adjacent", "redistribute_simple",
	"ResizeSettings",

	# State machine
	"DividerController", "DragState", "DragSnapshot",
	"PointerEvent", "GeometrySource", "StyleSink", "SignalSource",
	"build_divider", "mount_divider", "mount_dividers",

	# Errors
	"ResizeError", "ConfigurationError",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Track": ("pyezsplit.resize.track", "Track"),
	"TrackSnapshot": ("pyezsplit.resize.track", "TrackSnapshot"),
	"Rect": ("pyezsplit.resize.track", "Rect"),
	"Role": ("pyezsplit.resize.track", "Role"),
	"Unit": ("pyezsplit.resize.track", "Unit"),
	"Direction": ("pyezsplit.resize.track", "Direction"),
	"DividerPosition": ("pyezsplit.resize.track", "DividerPosition"),

	"invert": ("pyezsplit.resize.signs", "invert"),
	"signed_delta": ("pyezsplit.resize.signs", "signed_delta"),
	"axis_for": ("pyezsplit.resize.signs", "axis_for"),
	"apply_collapse": ("pyezsplit.resize.collapse", "apply_collapse"),
	"RedistributionPolicy": ("pyezsplit.resize.policy", "RedistributionPolicy"),
	"Redistribution": ("pyezsplit.resize.redistribute", "Redistribution"),
	"redistribute": ("pyezsplit.resize.redistribute", "redistribute"),
	"redistribute_line": ("pyezsplit.resize.redistribute", "redistribute_line"),
	"redistribute_adjacent": ("pyezsplit.resize.redistribute", "redistribute_adjacent"),
	"redistribute_simple": ("pyezsplit.resize.redistribute", "redistribute_simple"),
	"ResizeSettings": ("pyezsplit.resize.settings", "ResizeSettings"),

	"DividerController": ("pyezsplit.resize.divider", "DividerController"),
	"DragState": ("pyezsplit.resize.divider", "DragState"),
	"DragSnapshot": ("pyezsplit.resize.divider", "DragSnapshot"),
	"PointerEvent": ("pyezsplit.resize.capabilities", "PointerEvent"),
	"GeometrySource": ("pyezsplit.resize.capabilities", "GeometrySource"),
	"StyleSink": ("pyezsplit.resize.capabilities", "StyleSink"),
	"SignalSource": ("pyezsplit.resize.capabilities", "SignalSource"),
	"build_divider": ("pyezsplit.resize.mount", "build_divider"),
	"mount_divider": ("pyezsplit.resize.mount", "mount_divider"),
	"mount_dividers": ("pyezsplit.resize.mount", "mount_dividers"),

	"ResizeError": ("pyezsplit.resize.errors", "ResizeError"),
	"ConfigurationError": ("pyezsplit.resize.errors", "ConfigurationError"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezsplit.resize.track import Track, TrackSnapshot, Rect, Role, Unit, Direction, DividerPosition
	from pyezsplit.resize.signs import invert, signed_delta, axis_for
	from pyezsplit.resize.collapse import apply_collapse
	from pyezsplit.resize.policy import RedistributionPolicy
	from pyezsplit.resize.redistribute import (
		Redistribution, redistribute, redistribute_line, redistribute_adjacent, redistribute_simple,
	)
	from pyezsplit.resize.settings import ResizeSettings
	from pyezsplit.resize.divider import DividerController, DragState, DragSnapshot
	from pyezsplit.resize.capabilities import PointerEvent, GeometrySource, StyleSink, SignalSource
	from pyezsplit.resize.mount import build_divider, mount_divider, mount_dividers
	from pyezsplit.resize.errors import ResizeError, ConfigurationError
