# ---------------------------------------------------------------------------
# File: values.py
# ---------------------------------------------------------------------------
# Description:
#	Text form of live size values ("240px", "1.5fr").
#
# Notes:
#	- Style stores keep values as text, the way a stylesheet would.
#	- A share reads back only from an fr value or a bare number.
#	  Anything else is "unset" and the track falls back to its default.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import math
from typing import Optional

from pyezsplit.resize.track import Unit


def format_size(value: float, unit: Unit) -> str:
	return f"{float(value)!r}{unit.value}"


def parse_size(text: Optional[str]) -> Optional[tuple[float, Optional[Unit]]]:
	"""
	Parse "240px" / "1.5fr" / "3" into (value, unit). None if unparsable.
	"""
	if text is None:
		return None

	raw = str(text).strip().lower()
	unit: Optional[Unit] = None

	for candidate in Unit:
		if raw.endswith(candidate.value):
			unit = candidate
			raw = raw[: -len(candidate.value)].strip()
			break

	try:
		value = float(raw)
	except ValueError:
		return None

	if math.isnan(value):
		return None
	return value, unit


def parse_share(text: Optional[str]) -> Optional[float]:
	parsed = parse_size(text)
	if parsed is None:
		return None

	value, unit = parsed
	if unit is Unit.PX:
		return None
	return value
