# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Entry point: `python -m pyezsplit` opens the demo layout.
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezsplit.app import App, DEMO_LAYOUT


def build_app(app: App) -> None:
	"""
	Mount the initial layout.
	"""
	app.set_layout(DEMO_LAYOUT)


def main() -> None:
	app = App(width=1200, height=800, cfg={"telemetry_enabled": True, "telemetry_sink": "log"})
	build_app(app)
	app.run()


if __name__ == "__main__":
	main()
