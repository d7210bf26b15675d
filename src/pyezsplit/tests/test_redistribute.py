# ---------------------------------------------------------------------------
# File: test_redistribute.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for fr share redistribution strategies.
#
# Notes:
#	- Pure unit tests on TrackSnapshots; no geometry or Tk.
#	- Bounds are pixels; with flex_px == 100 * total shares, 1 share == 100px.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial tests
# 01/14/2026	Paul G. LeDuc				Two-track and simple policies
# 01/15/2026	Paul G. LeDuc				Saturation give-back
# ---------------------------------------------------------------------------

from __future__ import annotations

import math

import pytest

from pyezsplit.resize.errors import ConfigurationError
from pyezsplit.resize.policy import RedistributionPolicy
from pyezsplit.resize.redistribute import (
	flex_space_px,
	px_per_share,
	redistribute,
	redistribute_adjacent,
	redistribute_line,
	redistribute_simple,
)
from pyezsplit.resize.settings import ResizeSettings
from pyezsplit.resize.track import Role, TrackSnapshot, Unit


def _fr(track_id: str, size: float, size_min: float = 0.0, size_max: float = math.inf) -> TrackSnapshot:
	return TrackSnapshot(
		id=track_id,
		role=Role.PANE,
		unit=Unit.FR,
		size=size,
		size_px=0.0,
		position=0.0,
		size_min=size_min,
		size_max=size_max,
	)


def _total(sizes: dict[str, float]) -> float:
	return sum(sizes.values())


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def test_flex_space_excludes_px_panes_and_divider_gaps():
	tracks = [
		TrackSnapshot("side", Role.PANE, Unit.PX, 200.0, 200.0, 0.0),
		# Declared fr, but a divider only ever counts as a gap
		TrackSnapshot("d1", Role.DIVIDER, Unit.FR, 1.0, 4.0, 200.0),
		TrackSnapshot("main", Role.PANE, Unit.FR, 1.0, 300.0, 204.0),
	]

	assert flex_space_px(504.0, tracks) == 300.0


def test_px_per_share():
	assert px_per_share([_fr("a", 1), _fr("b", 3)], 400.0) == 100.0
	assert px_per_share([_fr("a", 0), _fr("b", 0)], 400.0) is None
	assert px_per_share([_fr("a", 1)], 0.0) is None


# ---------------------------------------------------------------------------
# Line-wide proportional
# ---------------------------------------------------------------------------

def test_line_equal_split_grows_target():
	a, b = _fr("a", 1), _fr("b", 1)

	result = redistribute_line(a, [a, b], 50.0, 200.0)

	assert result is not None
	assert result.px_per_share == 100.0
	assert result.sizes["a"] == pytest.approx(1.5)
	assert result.sizes["b"] == pytest.approx(0.5)
	assert result.applied_shares == pytest.approx(0.5)
	assert not result.saturated


def test_line_target_not_in_tracks_is_added():
	a, b = _fr("a", 1), _fr("b", 1)

	result = redistribute_line(a, [b], 50.0, 200.0)

	assert result is not None
	assert set(result.sizes) == {"a", "b"}
	assert result.sizes["a"] == pytest.approx(1.5)


def test_line_siblings_absorb_by_room():
	a = _fr("a", 2)
	b = _fr("b", 1, size_min=20.0)
	c = _fr("c", 1)

	result = redistribute_line(a, [a, b, c], 150.0, 400.0)

	assert result is not None
	# Rooms: b 0.8, c 1.0 -> 1.5 split 0.6667 / 0.8333
	assert result.sizes["a"] == pytest.approx(3.5)
	assert result.sizes["b"] == pytest.approx(1.0 - 1.5 * 0.8 / 1.8)
	assert result.sizes["c"] == pytest.approx(1.0 - 1.5 * 1.0 / 1.8)
	assert _total(result.sizes) == pytest.approx(4.0)
	assert not result.saturated


def test_line_saturation_gives_back_unabsorbed_change():
	a = _fr("a", 2)
	b = _fr("b", 1, size_min=20.0)
	c = _fr("c", 1)

	result = redistribute_line(a, [a, b, c], 250.0, 400.0)

	assert result is not None
	assert result.saturated
	assert result.sizes["a"] == pytest.approx(3.8)
	assert result.sizes["b"] == pytest.approx(0.2)
	assert result.sizes["c"] == pytest.approx(0.0)
	assert result.applied_shares == pytest.approx(1.8)
	assert result.dropped_shares == pytest.approx(0.7)
	assert _total(result.sizes) == pytest.approx(4.0)


def test_line_saturated_drag_further_changes_nothing():
	a = _fr("a", 2)
	b = _fr("b", 1, size_min=20.0)
	c = _fr("c", 1)

	first = redistribute_line(a, [a, b, c], 250.0, 400.0)
	further = redistribute_line(a, [a, b, c], 900.0, 400.0)

	assert first is not None and further is not None
	for tid in ("a", "b", "c"):
		assert further.sizes[tid] == pytest.approx(first.sizes[tid])


def test_line_target_bounds_clamp_applied_change():
	a = _fr("a", 1, size_max=120.0)
	b = _fr("b", 1)

	result = redistribute_line(a, [a, b], 50.0, 200.0)

	assert result is not None
	assert result.sizes["a"] == pytest.approx(1.2)
	assert result.sizes["b"] == pytest.approx(0.8)
	assert result.saturated


def test_line_unbounded_siblings_grow_by_share():
	a, b, c = _fr("a", 2), _fr("b", 1), _fr("c", 3)

	result = redistribute_line(a, [a, b, c], -100.0, 600.0)

	assert result is not None
	assert result.sizes["a"] == pytest.approx(1.0)
	assert result.sizes["b"] == pytest.approx(1.25)
	assert result.sizes["c"] == pytest.approx(3.75)
	assert all(math.isfinite(v) for v in result.sizes.values())


def test_line_unbounded_sibling_takes_growth_before_bounded_one():
	a = _fr("a", 2)
	b = _fr("b", 1, size_max=150.0)
	c = _fr("c", 1)

	result = redistribute_line(a, [a, b, c], -100.0, 400.0)

	assert result is not None
	assert result.sizes["a"] == pytest.approx(1.0)
	assert result.sizes["b"] == pytest.approx(1.0)
	assert result.sizes["c"] == pytest.approx(2.0)


def test_line_unbounded_siblings_at_zero_grow_equally():
	a, b, c = _fr("a", 2), _fr("b", 0), _fr("c", 0)

	result = redistribute_line(a, [a, b, c], -100.0, 200.0)

	assert result is not None
	assert result.sizes["b"] == pytest.approx(0.5)
	assert result.sizes["c"] == pytest.approx(0.5)


@pytest.mark.parametrize("delta_px", [-350.0, -120.0, -1.0, 0.0, 3.0, 75.0, 199.0, 640.0])
def test_line_conserves_total_shares(delta_px):
	tracks = [
		_fr("a", 1.5, size_min=30.0, size_max=350.0),
		_fr("b", 1.0, size_min=10.0),
		_fr("c", 0.5, size_max=120.0),
		_fr("d", 1.0),
	]

	result = redistribute_line(tracks[0], tracks, delta_px, 400.0)

	assert result is not None
	assert _total(result.sizes) == pytest.approx(4.0)


def test_line_zero_total_shares_is_noop():
	a, b = _fr("a", 0), _fr("b", 0)
	assert redistribute_line(a, [a, b], 50.0, 200.0) is None


def test_line_no_flex_space_is_noop():
	a, b = _fr("a", 1), _fr("b", 1)
	assert redistribute_line(a, [a, b], 50.0, 0.0) is None
	assert redistribute_line(a, [a, b], 50.0, -20.0) is None


def test_line_single_track_cannot_change():
	a = _fr("a", 1)

	result = redistribute_line(a, [a], 50.0, 100.0)

	assert result is not None
	assert result.sizes["a"] == pytest.approx(1.0)
	assert result.saturated


# ---------------------------------------------------------------------------
# Two-track adjacent
# ---------------------------------------------------------------------------

def test_adjacent_moves_shares_between_pair_only():
	a, b, c = _fr("a", 1), _fr("b", 1), _fr("c", 1)

	result = redistribute_adjacent(a, [a, b, c], 50.0, 300.0, adjacent_id="b")

	assert result is not None
	assert result.sizes == pytest.approx({"a": 1.5, "b": 0.5})
	assert "c" not in result.sizes
	assert not result.saturated


def test_adjacent_neighbour_bound_limits_both_sides():
	a = _fr("a", 1)
	b = _fr("b", 1, size_min=80.0)
	c = _fr("c", 1)

	result = redistribute_adjacent(a, [a, b, c], 50.0, 300.0, adjacent_id="b")

	assert result is not None
	assert result.sizes["a"] == pytest.approx(1.2)
	assert result.sizes["b"] == pytest.approx(0.8)
	assert result.saturated


def test_adjacent_target_bound_limits_both_sides():
	a = _fr("a", 1, size_min=70.0)
	b = _fr("b", 1)

	result = redistribute_adjacent(a, [a, b], -50.0, 200.0, adjacent_id="b")

	assert result is not None
	assert result.sizes["a"] == pytest.approx(0.7)
	assert result.sizes["b"] == pytest.approx(1.3)


def test_adjacent_without_neighbour_is_noop():
	a, b = _fr("a", 1), _fr("b", 1)

	assert redistribute_adjacent(a, [a, b], 50.0, 200.0, adjacent_id=None) is None
	assert redistribute_adjacent(a, [a, b], 50.0, 200.0, adjacent_id="missing") is None
	assert redistribute_adjacent(a, [a, b], 50.0, 200.0, adjacent_id="a") is None


# ---------------------------------------------------------------------------
# Proportional simple
# ---------------------------------------------------------------------------

def test_simple_shifts_by_current_share():
	a, b, c = _fr("a", 1), _fr("b", 1), _fr("c", 2)

	result = redistribute_simple(a, [a, b, c], 100.0, 400.0)

	assert result is not None
	assert result.sizes["a"] == pytest.approx(2.0)
	assert result.sizes["b"] == pytest.approx(1.0 - 1.0 / 3.0)
	assert result.sizes["c"] == pytest.approx(2.0 - 2.0 / 3.0)
	assert _total(result.sizes) == pytest.approx(4.0)
	assert not result.saturated


def test_simple_floors_siblings():
	a, b, c = _fr("a", 1), _fr("b", 1), _fr("c", 2)
	settings = ResizeSettings(min_share_floor=0.05)

	result = redistribute_simple(a, [a, b, c], 390.0, 400.0, settings=settings)

	assert result is not None
	assert result.sizes["b"] == pytest.approx(0.05)
	assert result.sizes["c"] == pytest.approx(0.05)
	assert result.saturated


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def test_redistribute_dispatches_by_policy_name():
	a, b, c = _fr("a", 1), _fr("b", 1), _fr("c", 1)

	line = redistribute(a, [a, b, c], 50.0, 300.0, policy="line-wide-proportional")
	pair = redistribute(a, [a, b, c], 50.0, 300.0, policy=RedistributionPolicy.TWO_TRACK, adjacent_id="b")

	assert line is not None and pair is not None
	assert set(line.sizes) == {"a", "b", "c"}
	assert set(pair.sizes) == {"a", "b"}


def test_redistribute_rejects_unknown_policy():
	a = _fr("a", 1)
	with pytest.raises(ConfigurationError):
		redistribute(a, [a], 10.0, 100.0, policy="elastic")
