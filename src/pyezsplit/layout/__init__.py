# ---------------------------------------------------------------------------
# File: layout/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Layout tree + headless capability adapters for pyezsplit.
#
# Notes:
#   - Uses lazy exports (PEP 562), same as pyezsplit.resize.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"LayoutNode",
	"LayoutTree",
	"MemoryStyleStore",
	"MemoryGeometry",
	"MemorySignals",
	"format_size",
	"parse_size",
	"parse_share",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"LayoutNode": ("pyezsplit.layout.tree", "LayoutNode"),
	"LayoutTree": ("pyezsplit.layout.tree", "LayoutTree"),
	"MemoryStyleStore": ("pyezsplit.layout.memory", "MemoryStyleStore"),
	"MemoryGeometry": ("pyezsplit.layout.memory", "MemoryGeometry"),
	"MemorySignals": ("pyezsplit.layout.memory", "MemorySignals"),
	"format_size": ("pyezsplit.layout.values", "format_size"),
	"parse_size": ("pyezsplit.layout.values", "parse_size"),
	"parse_share": ("pyezsplit.layout.values", "parse_share"),
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
	from pyezsplit.layout.tree import LayoutNode, LayoutTree
	from pyezsplit.layout.memory import MemoryStyleStore, MemoryGeometry, MemorySignals
	from pyezsplit.layout.values import format_size, parse_size, parse_share
