# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Configuration wrapper for pyezsplit.
#
# Notes:
#	- AppConfig is the light dict wrapper App has always used.
#	- cfg_pick reads a dotted key with a flat alias fallback; logging,
#	  telemetry and ResizeSettings all share that key convention.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Split AppConfig out of app.py
# 01/14/2026	Paul G. LeDuc				Add cfg_pick
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


def cfg_pick(cfg: Any | None, key: str, alias: str, default: Any = None) -> Any:
	"""
	Return cfg[key], else cfg[alias], else default.

	cfg may be None, an AppConfig, or a plain dict.
	"""
	if cfg is None:
		return default

	value = cfg.get(key, None)
	if value is None:
		value = cfg.get(alias, default)
	return value
