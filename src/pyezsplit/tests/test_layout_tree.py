# ---------------------------------------------------------------------------
# File: test_layout_tree.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for LayoutNode / LayoutTree lookups.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezsplit.layout.tree import LayoutNode, LayoutTree
from pyezsplit.resize.errors import ConfigurationError


LAYOUT = {
	"id": "main",
	"type": "group",
	"direction": "column",
	"children": [
		{"id": "side"},
		{"id": "d1", "type": "divider", "target": "side"},
		{
			"id": "work",
			"type": "group",
			"direction": "row",
			"children": [
				{"id": "editor"},
				{"children": [{"id": "d2", "type": "divider", "target": "console"}]},
				{"id": "console"},
			],
		},
	],
}


def test_node_from_dict_splits_options_and_children():
	node = LayoutNode.from_dict(LAYOUT)

	assert node.id == "main"
	assert node.is_group
	assert "children" not in node.options
	assert len(node.children) == 3


def test_node_type_defaults_to_pane():
	node = LayoutNode.from_dict({"id": "x"})

	assert node.type == "pane"
	assert not node.is_group
	assert not node.is_divider


def test_get_and_has():
	tree = LayoutTree.from_dict(LAYOUT)

	assert tree.has("editor")
	assert not tree.has("nope")
	assert tree.get("d1").is_divider

	with pytest.raises(ConfigurationError):
		tree.get("nope")


def test_find_parent_group_walks_through_wrappers():
	tree = LayoutTree.from_dict(LAYOUT)

	assert tree.find_parent_group("d1").id == "main"
	assert tree.find_parent_group("d2").id == "work"
	assert tree.find_parent_group("work").id == "main"


def test_find_parent_group_of_root_raises():
	tree = LayoutTree.from_dict(LAYOUT)

	with pytest.raises(ConfigurationError):
		tree.find_parent_group("main")


def test_tracks_in_skips_anonymous_children():
	tree = LayoutTree.from_dict(LAYOUT)

	assert [n.id for n in tree.tracks_in(tree.get("work"))] == ["editor", "console"]


def test_walk_is_preorder():
	tree = LayoutTree.from_dict(LAYOUT)

	ids = [n.id for n in tree.walk()]

	assert ids == ["main", "side", "d1", "work", "editor", "", "d2", "console"]


def test_dividers_lists_all_levels():
	tree = LayoutTree.from_dict(LAYOUT)

	assert [n.id for n in tree.dividers()] == ["d1", "d2"]


def test_duplicate_ids_are_rejected():
	with pytest.raises(ConfigurationError, match="Duplicate"):
		LayoutTree.from_dict({
			"id": "main",
			"type": "group",
			"children": [{"id": "a"}, {"id": "g", "type": "group", "children": [{"id": "a"}]}],
		})
