# ---------------------------------------------------------------------------
# File: settings.py
# ---------------------------------------------------------------------------
# Description:
#	Typed resize settings read from App configuration.
#
# Notes:
#	Supported cfg keys (dotted key wins over flat alias):
#	- "resize.epsilon", "resize_epsilon"			(default: 1e-4)
#	- "resize.min_share_floor", "resize_min_share_floor"	(default: 0.001)
#	- "resize.policy", "resize_policy"			(default: "line-wide-proportional")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pyezsplit.core.config import cfg_pick
from pyezsplit.resize.errors import ConfigurationError
from pyezsplit.resize.policy import RedistributionPolicy


DEFAULT_EPSILON = 1e-4
DEFAULT_MIN_SHARE_FLOOR = 0.001


@dataclass(frozen=True, slots=True)
class ResizeSettings:
	"""
	ResizeSettings

	- epsilon:			Share-unit tolerance for the redistribution loop.
	- min_share_floor:	Smallest share the proportional-simple policy leaves on a track.
	- default_policy:	Policy for dividers that do not declare one.
	"""
	epsilon: float = DEFAULT_EPSILON
	min_share_floor: float = DEFAULT_MIN_SHARE_FLOOR
	default_policy: RedistributionPolicy = RedistributionPolicy.LINE_WIDE

	def __post_init__(self) -> None:
		if not self.epsilon > 0:
			raise ConfigurationError(f"resize epsilon must be > 0, got {self.epsilon!r}")
		if self.min_share_floor < 0:
			raise ConfigurationError(
				f"resize min_share_floor must be >= 0, got {self.min_share_floor!r}"
			)

	@classmethod
	def from_cfg(cls, cfg: Any | None) -> "ResizeSettings":
		"""
		Build settings from an AppConfig, a dict, or None.
		"""
		epsilon = cfg_pick(cfg, "resize.epsilon", "resize_epsilon", DEFAULT_EPSILON)
		floor = cfg_pick(cfg, "resize.min_share_floor", "resize_min_share_floor", DEFAULT_MIN_SHARE_FLOOR)
		policy = cfg_pick(cfg, "resize.policy", "resize_policy", RedistributionPolicy.LINE_WIDE)

		return cls(
			epsilon=_to_float("resize.epsilon", epsilon),
			min_share_floor=_to_float("resize.min_share_floor", floor),
			default_policy=RedistributionPolicy.parse(policy),
		)


def _to_float(key: str, value: Any) -> float:
	try:
		return float(value)
	except (TypeError, ValueError) as ex:
		raise ConfigurationError(f"{key} must be a number, got {value!r}") from ex
