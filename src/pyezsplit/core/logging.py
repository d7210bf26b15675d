# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyezsplit (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- Safe to call before any Tk window exists (the resize core is headless).
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys (dotted key wins over flat alias):
#	- Level:
#		"logging.level", "log_level"			(default: "INFO")
#	- Resize core level (overrides Level for pyezsplit.app.resize):
#		"logging.resize_level", "log_resize_level"	(default: None)
#	- Console handler:
#		"logging.console", "log_console"		(default: True)
#	- File handler:
#		"logging.file", "log_file"			(default: None)
#	- File mode:
#		"logging.file_mode", "log_file_mode"		(default: "a")
#	- Root reset (clear handlers on re-init):
#		"logging.reset_root", "log_reset_root"		(default: True)
#	- Format:
#		"logging.format", "log_format"			(default: standard format)
#	- Date format:
#		"logging.datefmt", "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Add resize_level override for drag tracing
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_BASE = "pyezsplit.app"
RESIZE_LOGGER_NAME = f"{APP_LOGGER_BASE}.resize"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	"""
	Return a logger by explicit name.
	"""
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()              -> pyezsplit.app
		get_app_logger("resize")      -> pyezsplit.app.resize
		get_app_logger("resize.tk")   -> pyezsplit.app.resize.tk
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_BASE}.{component}")
	return logging.getLogger(APP_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pyezsplit.

	Safe to call multiple times. Reconfiguration only happens when the
	configuration signature changes.

	Args:
		cfg:
			Any object that supports cfg.get(key, default) (e.g., AppConfig) or a dict-like.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_cfg_pick(cfg, "logging.level", "log_level", "INFO"))

	resize_raw = _cfg_pick(cfg, "logging.resize_level", "log_resize_level", None)
	resize_level = _coerce_level(resize_raw) if resize_raw is not None else None

	console_enabled = bool(_cfg_pick(cfg, "logging.console", "log_console", True))

	log_file = _cfg_pick(cfg, "logging.file", "log_file", None)
	log_file = str(log_file) if log_file else None

	file_mode = _coerce_file_mode(_cfg_pick(cfg, "logging.file_mode", "log_file_mode", "a"))
	reset_root = bool(_cfg_pick(cfg, "logging.reset_root", "log_reset_root", True))

	fmt = str(_cfg_pick(cfg, "logging.format", "log_format", DEFAULT_FORMAT))
	datefmt = str(_cfg_pick(cfg, "logging.datefmt", "log_datefmt", DEFAULT_DATEFMT))

	signature: tuple[Any, ...] = (
		level,
		resize_level,
		console_enabled,
		log_file,
		file_mode,
		reset_root,
		fmt,
		datefmt,
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	# Handlers must pass the more verbose of the two levels
	handler_level = min(level, resize_level) if resize_level is not None else level

	_configure_root_logger(
		level=level,
		handler_level=handler_level,
		console_enabled=console_enabled,
		log_file=log_file,
		file_mode=file_mode,
		fmt=fmt,
		datefmt=datefmt,
		reset_root=reset_root,
	)

	# NOTSET lets the resize logger inherit from root again on re-init
	logging.getLogger(RESIZE_LOGGER_NAME).setLevel(
		resize_level if resize_level is not None else logging.NOTSET
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_pick(cfg: Any | None, key: str, alias: str, default: Any = None) -> Any:
	"""
	Look up a dotted key, then its flat alias, then fall back to default.
	"""
	value = _cfg_get(cfg, key, None)
	if value is None:
		value = _cfg_get(cfg, alias, default)
	return value


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	"""
	Best-effort config getter.

	Supports:
	- cfg.get(key, default)
	- dict-like objects
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		try:
			return getter(key, default)
		except Exception:
			return default

	try:
		return cfg[key]  # type: ignore[index]
	except Exception:
		return default


def _coerce_level(level: Any) -> int:
	"""
	Convert common representations of logging levels to an int.
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		return getattr(logging, val, logging.INFO)

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	"""
	Only "a" or "w" are accepted for the FileHandler.
	"""
	if isinstance(mode, str):
		val = mode.strip().lower()
		if val in ("a", "w"):
			return val
	return "a"


def _configure_root_logger(
	*,
	level: int,
	handler_level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	"""
	Configure the root logger.

	If reset_root=True, clear existing handlers to prevent duplicates.
	"""
	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(handler_level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		_ensure_parent_dir(log_file)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(handler_level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Reset module-scoped init state (intended for unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
