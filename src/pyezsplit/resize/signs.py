# ---------------------------------------------------------------------------
# File: signs.py
# ---------------------------------------------------------------------------
# Description:
#	Sign convention and pointer axis for divider drags.
#
# Notes:
#	- Dragging toward +axis grows the target when the divider sits on the
#	  target's end edge and shrinks it when it sits on the start edge.
#	- The table is the single source for that rule; both the px path and
#	  the fr path read it. Every (direction, position) pair is listed.
#	- The pointer axis follows the container direction, not the divider.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Literal

from pyezsplit.resize.track import Direction, DividerPosition


Axis = Literal["x", "y"]


_INVERT: dict[tuple[Direction, DividerPosition], bool] = {
	(Direction.ROW, DividerPosition.START): True,
	(Direction.ROW, DividerPosition.END): False,
	(Direction.COLUMN, DividerPosition.START): True,
	(Direction.COLUMN, DividerPosition.END): False,
}


def invert(direction: Direction, position: DividerPosition) -> bool:
	"""
	True when a positive pointer delta must shrink the target.
	"""
	return _INVERT[(direction, position)]


def signed_delta(delta_px: float, direction: Direction, position: DividerPosition) -> float:
	return -delta_px if invert(direction, position) else delta_px


def axis_for(direction: Direction) -> Axis:
	"""
	Pointer coordinate used for a container laid out in `direction`.
	"""
	return "y" if direction is Direction.ROW else "x"
