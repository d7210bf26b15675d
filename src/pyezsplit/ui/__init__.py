# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pyezsplit (Tk host).
#
# Notes:
#   - Uses lazy exports to avoid circular imports (PEP 562).
#   - Do NOT import from pyezsplit.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"SplitView",
	"TkStyleStore",
	"TkGeometry",
	"TkSignals",
	"GridSlot",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"SplitView": ("pyezsplit.ui.splitview", "SplitView"),
	"TkStyleStore": ("pyezsplit.ui.tk_adapters", "TkStyleStore"),
	"TkGeometry": ("pyezsplit.ui.tk_adapters", "TkGeometry"),
	"TkSignals": ("pyezsplit.ui.tk_adapters", "TkSignals"),
	"GridSlot": ("pyezsplit.ui.tk_adapters", "GridSlot"),
}

def __getattr__(name: str) -> Any:
	"""
	Lazy attribute resolver for pyezsplit.ui exports.
	"""
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
	from pyezsplit.ui.splitview import SplitView
	from pyezsplit.ui.tk_adapters import TkStyleStore, TkGeometry, TkSignals, GridSlot
