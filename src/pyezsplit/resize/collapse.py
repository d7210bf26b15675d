# ---------------------------------------------------------------------------
# File: collapse.py
# ---------------------------------------------------------------------------
# Description:
#	Bistable collapse policy for px tracks.
#
# Notes:
#	- collapse_at == 0 disables the policy for a track.
#	- Decided against the size at drag start, so one gesture can cross
#	  each threshold at most once.
#	- Thresholds see the raw proposal; only the pass-through size is
#	  clamped to min/max. Snapped values may sit outside min/max.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/17/2026	Paul G. LeDuc				Decide on the raw size, clamp after
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezsplit.core.logging import get_app_logger
from pyezsplit.resize.track import Track


log = get_app_logger("resize.collapse")


def apply_collapse(track: Track, proposed: float, size_before: float) -> float:
	"""
	Resolve a proposed px size against the track's collapse thresholds.

	- Collapsed before the drag and dragged past collapse_to: snap open to size_default.
	- Dragged below collapse_at: snap shut to collapse_to.
	- Otherwise the proposed size, clamped to size_min/size_max.
	"""
	if track.collapse_at == 0:
		return min(max(proposed, track.size_min), track.size_max)

	was_collapsed = size_before <= track.collapse_at

	if was_collapsed and proposed > track.collapse_to:
		log.debug("track %s: expand %s -> %s", track.id, proposed, track.size_default)
		return track.size_default

	if proposed < track.collapse_at:
		log.debug("track %s: collapse %s -> %s", track.id, proposed, track.collapse_to)
		return track.collapse_to

	return min(max(proposed, track.size_min), track.size_max)
