# ---------------------------------------------------------------------------
# File: tree.py
# ---------------------------------------------------------------------------
# Description:
#	Declarative layout tree (groups, panes, dividers) for pyezsplit.
#
# Notes:
#	- A node is its option dict plus ordered children. Options use the
#	  Track.from_options keys (id, type, unit, size_default, ...).
#	- Track ids must be unique across the whole tree: the style store is
#	  keyed by id alone.
#	- Children without an id are structural wrappers: they are walked
#	  through but never become tracks.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional

from pyezsplit.resize.errors import ConfigurationError
from pyezsplit.resize.track import Role


@dataclass(slots=True)
class LayoutNode:
	options: dict[str, Any] = field(default_factory=dict)
	children: list["LayoutNode"] = field(default_factory=list)

	@classmethod
	def from_dict(cls, data: Mapping[str, Any]) -> "LayoutNode":
		"""
		Build a node (and its subtree) from a nested dict.

		{"id": "main", "type": "group", "direction": "column", "children": [...]}
		"""
		options = {k: v for k, v in data.items() if k != "children"}
		children = [cls.from_dict(child) for child in data.get("children", ())]
		return cls(options=options, children=children)

	@property
	def id(self) -> str:
		return str(self.options.get("id") or "")

	@property
	def type(self) -> str:
		return str(self.options.get("type") or Role.PANE.value).strip().lower()

	@property
	def is_group(self) -> bool:
		return self.type == Role.GROUP.value

	@property
	def is_divider(self) -> bool:
		return self.type == Role.DIVIDER.value

	def __repr__(self) -> str:
		return f"<LayoutNode id={self.id!r} type={self.type!r} children={len(self.children)}>"


class LayoutTree:
	"""
	LayoutTree

	Indexes a LayoutNode tree by id and answers the lookups a divider
	needs: its enclosing group and the tracks that share it.
	"""

	def __init__(self, root: LayoutNode) -> None:
		self.root = root
		self._by_id: dict[str, LayoutNode] = {}
		self._parents: dict[int, LayoutNode] = {}
		self._index(root, None)

	@classmethod
	def from_dict(cls, data: Mapping[str, Any]) -> "LayoutTree":
		return cls(LayoutNode.from_dict(data))

	# -----------------------------------------------------------------------
	# Lookup
	# -----------------------------------------------------------------------

	def get(self, node_id: str) -> LayoutNode:
		try:
			return self._by_id[node_id]
		except KeyError as ex:
			raise ConfigurationError(f"Unknown layout node id: {node_id!r}") from ex

	def has(self, node_id: str) -> bool:
		return node_id in self._by_id

	def parent_of(self, node: LayoutNode) -> Optional[LayoutNode]:
		return self._parents.get(id(node))

	def find_parent_group(self, node_id: str) -> LayoutNode:
		"""
		Nearest ancestor of node_id whose type is group.
		"""
		parent = self.parent_of(self.get(node_id))
		while parent is not None:
			if parent.is_group:
				return parent
			parent = self.parent_of(parent)

		raise ConfigurationError(f"No parent group found for {node_id!r}")

	def tracks_in(self, group: LayoutNode) -> list[LayoutNode]:
		"""
		Direct children of group that declare an id, in layout order.
		"""
		return [child for child in group.children if child.id]

	def walk(self) -> Iterator[LayoutNode]:
		stack = [self.root]
		while stack:
			node = stack.pop()
			yield node
			stack.extend(reversed(node.children))

	def dividers(self) -> list[LayoutNode]:
		return [node for node in self.walk() if node.is_divider and node.id]

	# -----------------------------------------------------------------------
	# Internal helpers
	# -----------------------------------------------------------------------

	def _index(self, node: LayoutNode, parent: Optional[LayoutNode]) -> None:
		if parent is not None:
			self._parents[id(node)] = parent

		if node.id:
			if node.id in self._by_id:
				raise ConfigurationError(f"Duplicate layout node id: {node.id!r}")
			self._by_id[node.id] = node

		for child in node.children:
			self._index(child, node)
