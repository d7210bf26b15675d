# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exception types for the pyezsplit resize core.
#
# Notes:
#	- Only configuration problems are raised. Numeric edge cases
#	  (zero shares, saturation, out-of-range deltas) are handled in place.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations


class ResizeError(Exception):
	"""
	Base class for resize core errors.
	"""


class ConfigurationError(ResizeError):
	"""
	A divider or track cannot be built from its declared configuration.

	Raised for a missing enclosing group, an unknown target pane, or a
	malformed option value. Fatal for that divider only.
	"""
