# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pyezsplit.
#
# Notes:
#   - Uses lazy exports so importing pyezsplit.app does not start Tk or
#     import ttkthemes until App is actually used.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"DEMO_LAYOUT",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pyezsplit.app.app", "App"),
	"DEMO_LAYOUT": ("pyezsplit.app.demo", "DEMO_LAYOUT"),
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
	from pyezsplit.app.app import App
	from pyezsplit.app.demo import DEMO_LAYOUT
