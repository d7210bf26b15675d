# ---------------------------------------------------------------------------
# File: demo.py
# ---------------------------------------------------------------------------
# Description:
#	Sample layout shown by `python -m pyezsplit`.
#
# Notes:
#	- Sidebar is px with a collapse threshold; the editor/preview pair
#	  and the editor/console stack are fr.
#	- The preview divider uses the two-track policy; the rest use the
#	  configured default.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any


DIVIDER_PX = 5

DEMO_LAYOUT: dict[str, Any] = {
	"id": "main",
	"type": "group",
	"direction": "column",
	"children": [
		{
			"id": "sidebar",
			"label": "Sidebar",
			"unit": "px",
			"size_default": 240,
			"size_min": 120,
			"size_max": 480,
			"collapse_at": 80,
			"collapse_to": 0,
		},
		{
			"id": "sidebar-divider",
			"type": "divider",
			"target": "sidebar",
			"divider_position": "end",
			"size_default": DIVIDER_PX,
		},
		{
			"id": "work",
			"type": "group",
			"direction": "row",
			"unit": "fr",
			"size_default": 3,
			"children": [
				{"id": "editor", "label": "Editor", "unit": "fr", "size_default": 2},
				{
					"id": "console-divider",
					"type": "divider",
					"target": "console",
					"divider_position": "start",
					"size_default": DIVIDER_PX,
				},
				{"id": "console", "label": "Console", "unit": "fr", "size_default": 1, "size_min": 60},
			],
		},
		{
			"id": "preview-divider",
			"type": "divider",
			"target": "preview",
			"divider_position": "start",
			"policy": "two-track-adjacent",
			"size_default": DIVIDER_PX,
		},
		{"id": "preview", "label": "Preview", "unit": "fr", "size_default": 1, "size_min": 100},
	],
}
