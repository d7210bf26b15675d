# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for AppConfig, cfg_pick, ResizeSettings and policy parsing.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezsplit.core.config import AppConfig, cfg_pick
from pyezsplit.resize.errors import ConfigurationError, ResizeError
from pyezsplit.resize.policy import RedistributionPolicy
from pyezsplit.resize.settings import DEFAULT_EPSILON, DEFAULT_MIN_SHARE_FLOOR, ResizeSettings


def test_appconfig_get():
	assert AppConfig().get("x", 1) == 1
	assert AppConfig({"x": 2}).get("x", 1) == 2


def test_cfg_pick_prefers_dotted_key():
	cfg = {"resize.epsilon": 0.5, "resize_epsilon": 0.1}

	assert cfg_pick(cfg, "resize.epsilon", "resize_epsilon") == 0.5
	assert cfg_pick({"resize_epsilon": 0.1}, "resize.epsilon", "resize_epsilon") == 0.1
	assert cfg_pick(None, "resize.epsilon", "resize_epsilon", 7) == 7
	assert cfg_pick(AppConfig(), "resize.epsilon", "resize_epsilon", 7) == 7


def test_settings_defaults():
	s = ResizeSettings.from_cfg(None)

	assert s.epsilon == DEFAULT_EPSILON
	assert s.min_share_floor == DEFAULT_MIN_SHARE_FLOOR
	assert s.default_policy is RedistributionPolicy.LINE_WIDE


def test_settings_from_cfg():
	s = ResizeSettings.from_cfg(AppConfig({
		"resize_epsilon": "1e-6",
		"resize.min_share_floor": 0.01,
		"resize.policy": "Two-Track-Adjacent",
	}))

	assert s.epsilon == 1e-6
	assert s.min_share_floor == 0.01
	assert s.default_policy is RedistributionPolicy.TWO_TRACK


@pytest.mark.parametrize(
	"cfg",
	[
		{"resize.epsilon": 0},
		{"resize.epsilon": "tiny"},
		{"resize.min_share_floor": -1},
		{"resize.policy": "springy"},
	],
)
def test_settings_reject_bad_values(cfg):
	with pytest.raises(ConfigurationError):
		ResizeSettings.from_cfg(cfg)


def test_policy_parse():
	assert RedistributionPolicy.parse("proportional-simple") is RedistributionPolicy.SIMPLE
	assert RedistributionPolicy.parse(RedistributionPolicy.TWO_TRACK) is RedistributionPolicy.TWO_TRACK


def test_configuration_error_is_a_resize_error():
	assert issubclass(ConfigurationError, ResizeError)
