# ---------------------------------------------------------------------------
# File: redistribute.py
# ---------------------------------------------------------------------------
# Description:
#	Share (fr) redistribution strategies for divider drags.
#
# Notes:
#	- Every strategy converts the pixel delta to shares once, using the
#	  px-per-share of the snapshot it is given. Nothing is carried between
#	  drag frames.
#	- Strategies are pure: they take TrackSnapshots and return new shares.
#	  Writing them to the style store is the caller's job.
#	- Zero total shares or a non-positive flex budget is a no-op (None).
#	- Bounds on fr tracks are pixels and are converted per call.
#
#	Policies:
#	- line-wide-proportional: siblings absorb the opposite change in
#	  proportion to their remaining room, iterating as siblings saturate.
#	- two-track-adjacent: target and the pane across the divider only,
#	  strictly zero-sum.
#	- proportional-simple: one pass, by current share, floored.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Add two-track and simple policies
# 01/15/2026	Paul G. LeDuc				Give back unabsorbed shares on saturation
# ---------------------------------------------------------------------------

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from pyezsplit.core.logging import get_app_logger
from pyezsplit.resize.policy import RedistributionPolicy
from pyezsplit.resize.settings import ResizeSettings
from pyezsplit.resize.track import Role, TrackSnapshot, Unit


log = get_app_logger("resize.redistribute")

DEFAULT_SETTINGS = ResizeSettings()


@dataclass(frozen=True, slots=True)
class Redistribution:
	"""
	Result of one redistribution call.

	- sizes:			New share per track id (target first-class, order preserved).
	- px_per_share:		Ratio used for the px -> share conversion.
	- applied_shares:	Net change applied to the target.
	- dropped_shares:	Requested change that could not be applied.
	- saturated:		True when bounds stopped part of the change.
	"""
	sizes: dict[str, float]
	px_per_share: float
	applied_shares: float
	dropped_shares: float
	saturated: bool


Strategy = Callable[..., Optional[Redistribution]]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def flex_space_px(container_px: float, tracks: Iterable[TrackSnapshot]) -> float:
	"""
	Pixels left for fr tracks: container minus px panes minus divider gaps.

	Dividers count as gaps only, whatever unit they declare.
	"""
	fixed_px = 0.0
	gaps_px = 0.0

	for t in tracks:
		if t.role is Role.DIVIDER:
			gaps_px += t.size_px
		elif t.unit is Unit.PX:
			fixed_px += t.size_px

	return container_px - fixed_px - gaps_px


def px_per_share(tracks: Iterable[TrackSnapshot], flex_px: float) -> Optional[float]:
	total = sum(t.size for t in tracks)
	if total <= 0 or flex_px <= 0:
		return None
	return flex_px / total


def _share_bounds(track: TrackSnapshot, pps: float) -> tuple[float, float]:
	lo = track.size_min / pps
	hi = math.inf if math.isinf(track.size_max) else track.size_max / pps
	return lo, hi


def _clamp(v: float, lo: float, hi: float) -> float:
	return min(max(v, lo), hi)


def _with_target(target: TrackSnapshot, tracks: Sequence[TrackSnapshot]) -> list[TrackSnapshot]:
	if any(t.id == target.id for t in tracks):
		return list(tracks)
	return [target, *tracks]


def _weights(rooms: dict[str, float], sizes: dict[str, float]) -> dict[str, float]:
	"""
	Absorption weights for one pass.

	Finite room weighs by room. If any candidate is unbounded, only the
	unbounded ones take part, weighted by current share (equal if all zero).
	"""
	unbounded = [tid for tid, room in rooms.items() if math.isinf(room)]
	if not unbounded:
		return dict(rooms)

	total = sum(sizes[tid] for tid in unbounded)
	if total <= 0:
		return {tid: 1.0 for tid in unbounded}
	return {tid: sizes[tid] for tid in unbounded}


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def redistribute_line(
	target: TrackSnapshot,
	tracks: Sequence[TrackSnapshot],
	delta_px: float,
	flex_px: float,
	*,
	settings: ResizeSettings = DEFAULT_SETTINGS,
	adjacent_id: Optional[str] = None,
) -> Optional[Redistribution]:
	"""
	Apply delta_px to target and spread the opposite change over every other
	fr track in proportion to its room, iterating until absorbed or saturated.

	Args:
		target:			The fr track being dragged.
		tracks:			All fr tracks in the line (target included or not).
		delta_px:		Signed pixel change for target.
		flex_px:		Pixel budget shared by all fr tracks.
		settings:		Supplies epsilon.
		adjacent_id:	Unused; accepted so all strategies share a signature.

	Returns:
		Redistribution, or None when there is nothing to redistribute into.
	"""
	tracks = _with_target(target, tracks)
	pps = px_per_share(tracks, flex_px)
	if pps is None:
		log.debug("redistribute_line: no fr budget (flex_px=%s)", flex_px)
		return None

	eps = settings.epsilon
	delta = delta_px / pps

	lo, hi = _share_bounds(target, pps)
	applied = _clamp(target.size + delta, lo, hi) - target.size

	sizes = {t.id: t.size for t in tracks}
	bounds = {t.id: _share_bounds(t, pps) for t in tracks if t.id != target.id}

	# Siblings owe the opposite of what target took. >0 means they shrink.
	leftover = applied

	# Each pass either absorbs everything or exhausts at least one sibling
	for _ in range(len(bounds) + 1):
		if abs(leftover) <= eps:
			break

		sign = 1.0 if leftover > 0 else -1.0

		rooms: dict[str, float] = {}
		for tid, (s_lo, s_hi) in bounds.items():
			room = sizes[tid] - s_lo if sign > 0 else s_hi - sizes[tid]
			if room > eps:
				rooms[tid] = room

		if not rooms:
			break

		weights = _weights(rooms, sizes)
		total_weight = sum(weights.values())
		magnitude = abs(leftover)

		taken = 0.0
		for tid, weight in weights.items():
			part = min(magnitude * (weight / total_weight), rooms[tid])
			sizes[tid] -= sign * part
			taken += part

		leftover -= sign * taken

	saturated = abs(leftover) > eps
	if saturated:
		# Give back what nobody could absorb so the line keeps its total
		applied -= leftover
		log.debug(
			"redistribute_line: saturated target=%s dropped=%.6f shares",
			target.id,
			leftover,
		)

	sizes[target.id] = target.size + applied

	return Redistribution(
		sizes=sizes,
		px_per_share=pps,
		applied_shares=applied,
		dropped_shares=delta - applied,
		saturated=saturated or abs(delta - applied) > eps,
	)


def redistribute_adjacent(
	target: TrackSnapshot,
	tracks: Sequence[TrackSnapshot],
	delta_px: float,
	flex_px: float,
	*,
	settings: ResizeSettings = DEFAULT_SETTINGS,
	adjacent_id: Optional[str] = None,
) -> Optional[Redistribution]:
	"""
	Move shares between target and the fr track across the divider only.

	Both sides are clamped to their own bounds and the smaller change wins,
	so the pair stays zero-sum. Other tracks are untouched and omitted from
	the result. No-op when adjacent_id is not an fr track in `tracks`.
	"""
	tracks = _with_target(target, tracks)

	neighbour = next((t for t in tracks if t.id == adjacent_id), None)
	if neighbour is None or neighbour.id == target.id:
		log.debug("redistribute_adjacent: no fr neighbour for %s (adjacent=%r)", target.id, adjacent_id)
		return None

	pps = px_per_share(tracks, flex_px)
	if pps is None:
		log.debug("redistribute_adjacent: no fr budget (flex_px=%s)", flex_px)
		return None

	delta = delta_px / pps

	t_lo, t_hi = _share_bounds(target, pps)
	n_lo, n_hi = _share_bounds(neighbour, pps)

	wanted = _clamp(target.size + delta, t_lo, t_hi) - target.size
	allowed = neighbour.size - _clamp(neighbour.size - wanted, n_lo, n_hi)

	if wanted * allowed <= 0:
		applied = 0.0
	elif abs(allowed) < abs(wanted):
		applied = allowed
	else:
		applied = wanted

	return Redistribution(
		sizes={
			target.id: target.size + applied,
			neighbour.id: neighbour.size - applied,
		},
		px_per_share=pps,
		applied_shares=applied,
		dropped_shares=delta - applied,
		saturated=abs(delta - applied) > settings.epsilon,
	)


def redistribute_simple(
	target: TrackSnapshot,
	tracks: Sequence[TrackSnapshot],
	delta_px: float,
	flex_px: float,
	*,
	settings: ResizeSettings = DEFAULT_SETTINGS,
	adjacent_id: Optional[str] = None,
) -> Optional[Redistribution]:
	"""
	Clamp target, then shift the opposite change onto every other fr track
	by current share in a single pass. Each result is floored at
	settings.min_share_floor; when the floor engages the line total drifts.
	"""
	tracks = _with_target(target, tracks)
	pps = px_per_share(tracks, flex_px)
	if pps is None:
		log.debug("redistribute_simple: no fr budget (flex_px=%s)", flex_px)
		return None

	delta = delta_px / pps
	lo, hi = _share_bounds(target, pps)
	new_target = _clamp(target.size + delta, lo, hi)
	applied = new_target - target.size

	others = [t for t in tracks if t.id != target.id]
	other_total = sum(t.size for t in others)

	sizes: dict[str, float] = {}
	floored = False

	for t in tracks:
		if t.id == target.id:
			sizes[t.id] = new_target
			continue
		if other_total <= 0:
			continue

		proposed = t.size - applied * (t.size / other_total)
		if proposed < settings.min_share_floor:
			proposed = settings.min_share_floor
			floored = True
		sizes[t.id] = proposed

	return Redistribution(
		sizes=sizes,
		px_per_share=pps,
		applied_shares=applied,
		dropped_shares=delta - applied,
		saturated=floored or abs(delta - applied) > settings.epsilon,
	)


# ---------------------------------------------------------------------------
# Policy dispatch
# ---------------------------------------------------------------------------

STRATEGIES: dict[RedistributionPolicy, Strategy] = {
	RedistributionPolicy.LINE_WIDE: redistribute_line,
	RedistributionPolicy.TWO_TRACK: redistribute_adjacent,
	RedistributionPolicy.SIMPLE: redistribute_simple,
}


def redistribute(
	target: TrackSnapshot,
	tracks: Sequence[TrackSnapshot],
	delta_px: float,
	flex_px: float,
	*,
	policy: RedistributionPolicy | str = RedistributionPolicy.LINE_WIDE,
	settings: ResizeSettings = DEFAULT_SETTINGS,
	adjacent_id: Optional[str] = None,
) -> Optional[Redistribution]:
	"""
	Run the strategy registered for `policy`.
	"""
	strategy = STRATEGIES[RedistributionPolicy.parse(policy)]
	return strategy(
		target,
		tracks,
		delta_px,
		flex_px,
		settings=settings,
		adjacent_id=adjacent_id,
	)
