# ---------------------------------------------------------------------------
# File: track.py
# ---------------------------------------------------------------------------
# Description:
#	Track model for pyezsplit (panes, dividers, groups along one axis).
#
# Notes:
#	- Static fields come from layout options (strings allowed, as read from
#	  markup or JSON). Falsy option values fall back to defaults.
#	- Measured fields (size, size_px, start, end) are refreshed from a
#	  GeometrySource at every drag start; they are a cache, not the truth.
#	- fr tracks read their share from the live store; px tracks use their
#	  measured footprint.
#	- Bounds on fr tracks are pixels; the redistribution code converts them
#	  with the current px-per-share.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Add TrackSnapshot for drag-start capture
# 01/14/2026	Paul G. LeDuc				Add policy option for dividers
# ---------------------------------------------------------------------------

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, TypeVar

from pyezsplit.resize.errors import ConfigurationError

if TYPE_CHECKING:
	from pyezsplit.resize.capabilities import GeometrySource


class Role(str, Enum):
	PANE = "pane"
	DIVIDER = "divider"
	GROUP = "group"


class Unit(str, Enum):
	PX = "px"
	FR = "fr"


class Direction(str, Enum):
	ROW = "row"
	COLUMN = "column"


class DividerPosition(str, Enum):
	START = "start"
	END = "end"


_E = TypeVar("_E", bound=Enum)


@dataclass(frozen=True, slots=True)
class Rect:
	"""
	Pixel rectangle as reported by a geometry source.
	"""
	left: float
	top: float
	width: float
	height: float

	@property
	def right(self) -> float:
		return self.left + self.width

	@property
	def bottom(self) -> float:
		return self.top + self.height

	def span(self, direction: Direction) -> tuple[float, float, float]:
		"""
		Return (start, end, size) along the axis a track of this direction uses.

		row tracks stack vertically; column tracks sit side by side.
		"""
		if direction is Direction.ROW:
			return self.top, self.bottom, self.height
		return self.left, self.right, self.width


@dataclass(frozen=True, slots=True)
class TrackSnapshot:
	"""
	Immutable per-drag view of a track.
	"""
	id: str
	role: Role
	unit: Unit
	size: float
	size_px: float
	position: float
	size_min: float = 0.0
	size_max: float = math.inf

	@property
	def is_divider(self) -> bool:
		return self.role is Role.DIVIDER


@dataclass(slots=True)
class Track:
	"""
	Track

	One region along a layout axis.

	- id:				Stable identifier, unique within its group.
	- role:				pane | divider | group.
	- unit:				px | fr.
	- size_default:		Value restored by reset (track's own unit).
	- size_min/max:		Bounds in pixels (default 0 / inf).
	- collapse_at/to:	px-only bistable thresholds; collapse_at == 0 disables.
	- direction:		Axis; inherited from the enclosing group.
	- target:			Dividers only: id of the pane this divider resizes.
	- divider_position:	Dividers only: edge of the target it sits on.
	- policy:			Dividers only: redistribution policy name, or None.
	"""
	id: str
	role: Role = Role.PANE
	unit: Unit = Unit.PX
	size_default: float = 0.0
	size_min: float = 0.0
	size_max: float = math.inf
	collapse_at: float = 0.0
	collapse_to: float = 0.0
	direction: Direction = Direction.COLUMN
	target: str = ""
	divider_position: DividerPosition = DividerPosition.START
	policy: Optional[str] = None

	# Measured (refresh)
	size: float = field(default=0.0, compare=False)
	size_px: float = field(default=0.0, compare=False)
	start: float = field(default=0.0, compare=False)
	end: float = field(default=0.0, compare=False)

	@classmethod
	def from_options(
		cls,
		options: Mapping[str, Any],
		direction: Direction | str | None = None,
	) -> "Track":
		"""
		Build a Track from static layout options.

		Recognised keys: id, type, unit, size_default, size_min, size_max,
		collapse_at, collapse_to, direction, target, divider_position, policy.

		direction, when given, overrides the declared one (children inherit
		their group's axis).
		"""
		track_id = str(_opt(options, "id", ""))
		if not track_id:
			raise ConfigurationError(f"Track options have no id: {dict(options)!r}")

		axis = direction if direction else _opt(options, "direction", Direction.COLUMN)
		policy = _opt(options, "policy", None)

		track = cls(
			id=track_id,
			role=_enum(Role, _opt(options, "type", Role.PANE), "type", track_id),
			unit=_enum(Unit, _opt(options, "unit", Unit.PX), "unit", track_id),
			size_default=_number(options, "size_default", 0.0, track_id),
			size_min=_number(options, "size_min", 0.0, track_id),
			size_max=_number(options, "size_max", math.inf, track_id),
			collapse_at=_number(options, "collapse_at", 0.0, track_id),
			collapse_to=_number(options, "collapse_to", 0.0, track_id),
			direction=_enum(Direction, axis, "direction", track_id),
			target=str(_opt(options, "target", "")),
			divider_position=_enum(
				DividerPosition,
				_opt(options, "divider_position", DividerPosition.START),
				"divider_position",
				track_id,
			),
			policy=str(policy) if policy else None,
		)

		if track.size_min > track.size_max:
			raise ConfigurationError(
				f"Track {track_id!r}: size_min {track.size_min} exceeds size_max {track.size_max}"
			)

		return track

	# -----------------------------------------------------------------------
	# Live geometry
	# -----------------------------------------------------------------------

	def refresh(self, geometry: "GeometrySource") -> None:
		"""
		Re-read pixel footprint, edges and (for fr tracks) the live share.
		"""
		start, end, size_px = geometry.rect(self.id).span(self.direction)
		self.start = start
		self.end = end
		self.size_px = size_px

		if self.unit is Unit.PX:
			self.size = size_px
			return

		share = geometry.share(self.id)
		self.size = self.size_default if share is None else share

	def snapshot(self) -> TrackSnapshot:
		return TrackSnapshot(
			id=self.id,
			role=self.role,
			unit=self.unit,
			size=self.size,
			size_px=self.size_px,
			position=self.start,
			size_min=self.size_min,
			size_max=self.size_max,
		)

	def is_collapsed(self) -> bool:
		return self.size <= self.collapse_at

	@property
	def is_divider(self) -> bool:
		return self.role is Role.DIVIDER

	def __repr__(self) -> str:
		return f"<Track id={self.id!r} role={self.role.value} unit={self.unit.value} size={self.size!r}>"


# ---------------------------------------------------------------------------
# Option parsing
# ---------------------------------------------------------------------------

def _opt(options: Mapping[str, Any], key: str, default: Any) -> Any:
	value = options.get(key)
	return value if value else default


def _number(options: Mapping[str, Any], key: str, default: float, track_id: str) -> float:
	raw = _opt(options, key, default)
	try:
		value = float(raw)
	except (TypeError, ValueError) as ex:
		raise ConfigurationError(f"Track {track_id!r}: {key} must be a number, got {raw!r}") from ex

	if math.isnan(value):
		raise ConfigurationError(f"Track {track_id!r}: {key} must be a number, got {raw!r}")
	return value


def _enum(kind: type[_E], raw: Any, key: str, track_id: str) -> _E:
	if isinstance(raw, kind):
		return raw
	try:
		return kind(str(raw).strip().lower())
	except ValueError as ex:
		choices = ", ".join(str(m.value) for m in kind)
		raise ConfigurationError(
			f"Track {track_id!r}: {key} must be one of {choices}, got {raw!r}"
		) from ex
