# ---------------------------------------------------------------------------
# File: mount.py
# ---------------------------------------------------------------------------
# Description:
#	Build DividerControllers from a LayoutTree.
#
# Notes:
#	- build_divider raises ConfigurationError (no enclosing group, unknown
#	  target, bad options).
#	- mount_divider is the setup boundary: it logs the error and returns
#	  None, so one broken divider never stops the others from mounting.
#	- Track records are rebuilt on every mount; the style store carries
#	  sizes across mounts.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Add mount_dividers with per-divider signals
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable, Optional

from pyezsplit.core.logging import get_app_logger
from pyezsplit.core.telemetry import Telemetry
from pyezsplit.layout.tree import LayoutTree
from pyezsplit.resize.capabilities import GeometrySource, SignalSource, StyleSink
from pyezsplit.resize.divider import DividerController
from pyezsplit.resize.errors import ConfigurationError
from pyezsplit.resize.settings import ResizeSettings
from pyezsplit.resize.track import Role, Track


log = get_app_logger("resize.mount")

SignalFactory = Callable[[str], SignalSource]


def build_divider(
	divider_id: str,
	tree: LayoutTree,
	*,
	geometry: GeometrySource,
	sink: StyleSink,
	signals: SignalSource,
	settings: Optional[ResizeSettings] = None,
	telemetry: Optional[Telemetry] = None,
) -> DividerController:
	"""
	Resolve a divider's group, siblings and target, and wire a controller.
	"""
	node = tree.get(divider_id)
	if not node.is_divider:
		raise ConfigurationError(f"Layout node {divider_id!r} is a {node.type}, not a divider")

	group = tree.find_parent_group(divider_id)
	container = Track.from_options(group.options)

	tracks = [
		Track.from_options(child.options, direction=container.direction)
		for child in tree.tracks_in(group)
	]

	divider = next((t for t in tracks if t.id == divider_id), None)
	if divider is None:
		# Divider sits inside an anonymous wrapper within the group
		divider = Track.from_options(node.options, direction=container.direction)

	if not divider.target:
		raise ConfigurationError(f"Divider {divider_id!r} declares no target")

	target = next((t for t in tracks if t.id == divider.target and t.role is not Role.DIVIDER), None)
	if target is None:
		raise ConfigurationError(f"Target pane not found: {divider.target!r} (divider {divider_id!r})")

	controller = DividerController(
		divider,
		target,
		tracks,
		container,
		geometry=geometry,
		sink=sink,
		signals=signals,
		settings=settings,
		telemetry=telemetry,
	)

	log.debug(
		"mounted divider %s: target=%s group=%s policy=%s",
		divider_id,
		target.id,
		container.id,
		controller.policy.value,
	)
	return controller


def mount_divider(
	divider_id: str,
	tree: LayoutTree,
	*,
	geometry: GeometrySource,
	sink: StyleSink,
	signals: SignalSource,
	settings: Optional[ResizeSettings] = None,
	telemetry: Optional[Telemetry] = None,
) -> Optional[DividerController]:
	"""
	build_divider, but configuration errors are logged and yield None.
	"""
	try:
		return build_divider(
			divider_id,
			tree,
			geometry=geometry,
			sink=sink,
			signals=signals,
			settings=settings,
			telemetry=telemetry,
		)
	except ConfigurationError as ex:
		log.error("Failed to initialize divider %r: %s", divider_id, ex)
		return None


def mount_dividers(
	tree: LayoutTree,
	*,
	geometry: GeometrySource,
	sink: StyleSink,
	signals_for: SignalFactory,
	settings: Optional[ResizeSettings] = None,
	telemetry: Optional[Telemetry] = None,
) -> list[DividerController]:
	"""
	Mount every divider in the tree. Returns only the ones that mounted.
	"""
	controllers: list[DividerController] = []

	for node in tree.dividers():
		controller = mount_divider(
			node.id,
			tree,
			geometry=geometry,
			sink=sink,
			signals=signals_for(node.id),
			settings=settings,
			telemetry=telemetry,
		)
		if controller is not None:
			controllers.append(controller)

	return controllers
