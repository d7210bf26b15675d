# ---------------------------------------------------------------------------
# File: policy.py
# ---------------------------------------------------------------------------
# Description:
#	Redistribution policy tag, selected per divider.
#
# Notes:
#	- line-wide-proportional: every proportional sibling absorbs by room.
#	- two-track-adjacent:     only the pair around the divider, zero-sum.
#	- proportional-simple:    one pass by share, floored.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Any

from pyezsplit.resize.errors import ConfigurationError


class RedistributionPolicy(str, Enum):
	LINE_WIDE = "line-wide-proportional"
	TWO_TRACK = "two-track-adjacent"
	SIMPLE = "proportional-simple"

	@classmethod
	def parse(cls, value: Any) -> "RedistributionPolicy":
		if isinstance(value, cls):
			return value
		try:
			return cls(str(value).strip().lower())
		except ValueError as ex:
			choices = ", ".join(p.value for p in cls)
			raise ConfigurationError(
				f"Unknown redistribution policy {value!r} (expected one of: {choices})"
			) from ex
