# ---------------------------------------------------------------------------
# File: test_collapse.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the px collapse policy.
#
# Notes:
#	- Sizes are decided against the size at drag start.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezsplit.resize.collapse import apply_collapse
from pyezsplit.resize.track import Track


def _sidebar(**overrides) -> Track:
	options = {
		"id": "side",
		"size_default": 200,
		"collapse_at": 50,
		"collapse_to": 0,
	}
	options.update(overrides)
	return Track.from_options(options)


def test_disabled_when_collapse_at_is_zero():
	t = _sidebar(collapse_at=0)
	assert apply_collapse(t, 10.0, 200.0) == 10.0


def test_collapses_below_threshold():
	t = _sidebar()
	assert apply_collapse(t, 40.0, 200.0) == 0.0


def test_threshold_itself_does_not_collapse_open_track():
	t = _sidebar()
	assert apply_collapse(t, 50.0, 200.0) == 50.0


def test_open_track_above_threshold_is_untouched():
	t = _sidebar()
	assert apply_collapse(t, 150.0, 200.0) == 150.0


def test_collapsed_track_expands_to_default_when_dragged_open():
	t = _sidebar()
	assert apply_collapse(t, 10.0, 0.0) == 200.0
	assert apply_collapse(t, 300.0, 0.0) == 200.0


def test_collapsed_track_stays_at_collapse_to():
	t = _sidebar()
	assert apply_collapse(t, 0.0, 0.0) == 0.0


def test_nonzero_collapse_to():
	t = _sidebar(collapse_at=60, collapse_to=24)

	assert apply_collapse(t, 30.0, 200.0) == 24.0
	# Collapsed and not dragged past collapse_to: stays shut
	assert apply_collapse(t, 20.0, 24.0) == 24.0


def test_collapsed_track_dragged_further_shut_stays_collapsed():
	t = _sidebar(size_min=100, collapse_at=120)

	assert apply_collapse(t, -20.0, 0.0) == 0.0


def test_pass_through_is_clamped_to_bounds():
	t = _sidebar(size_min=100, size_max=300)

	assert apply_collapse(t, 80.0, 200.0) == 100.0
	assert apply_collapse(t, 420.0, 200.0) == 300.0


def test_thresholds_see_raw_size_not_clamped_size():
	# size_min above collapse_at: the clamp must not hide a collapse
	t = _sidebar(size_min=120, collapse_at=80)

	assert apply_collapse(t, 20.0, 240.0) == 0.0
	assert apply_collapse(t, 100.0, 240.0) == 120.0


def test_disabled_policy_still_clamps():
	t = _sidebar(collapse_at=0, size_min=100)

	assert apply_collapse(t, 10.0, 200.0) == 100.0
