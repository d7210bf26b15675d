# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyezsplit (logging, telemetry, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#	Nothing here may import pyezsplit.resize (resize imports core).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Export AppConfig + cfg_pick
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import AppConfig, cfg_pick
from .logging import init_logging, get_logger, get_app_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"AppConfig",
	"cfg_pick",
	"get_logger",
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]
