"""toolmark CLI — main application entry point."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console

from toolmark.shared.errors import ScenarioError
from toolmark.shared.formatters.indicator import render_indicator_rich
from toolmark.shared.services.preferences import IndicatorPreferences
from toolmark.shared.services.scenario import DEMO_SCENARIO, IndicatorSpec, load_scenario

LOG_DIR = Path.home() / ".toolmark" / "logs"


def _configure_logging(level_name: str, log_dir: Path | None = None) -> Path:
    """Send all logging to a rotating file; the TUI owns the terminal."""
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "toolmark.log"

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name.upper(), logging.WARNING))
    root.handlers.clear()
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s [pid=%(process)d] %(message)s"
    )
    file_handler = RotatingFileHandler(
        log_file, maxBytes=2_000_000, backupCount=5, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    return log_file


def print_snapshot(
    specs: list[IndicatorSpec],
    preferences: IndicatorPreferences,
    console: Console | None = None,
) -> None:
    """Render every indicator once, dots frozen at the first frame."""
    console = console or Console()
    palette = preferences.palette()
    for spec in specs:
        node = spec.build(palette, animate_default=preferences.animate_by_default)
        console.print(render_indicator_rich(node))


def main(argv: list[str] | None = None) -> None:
    import argparse

    parser = argparse.ArgumentParser(
        prog="toolmark",
        description="toolmark — live terminal indicators for tool invocations",
    )
    parser.add_argument(
        "--scenario", metavar="PATH",
        help="YAML file listing indicators to display (default: built-in demo)",
    )
    parser.add_argument(
        "--print", dest="print_only", action="store_true",
        help="Print a static snapshot of the indicators and exit (no TUI)",
    )
    parser.add_argument(
        "--animate", action="store_true",
        help="Animate running single indicators that do not set 'animate'",
    )
    parser.add_argument(
        "--prefs", metavar="PATH",
        help="Preferences JSON file (default: ~/.toolmark/preferences.json)",
    )
    parser.add_argument(
        "--log-level", metavar="LEVEL",
        default=os.getenv("TOOLMARK_LOG_LEVEL", "WARNING"),
        help="Log level for ~/.toolmark/logs/toolmark.log (default: WARNING)",
    )
    args = parser.parse_args(argv)

    log_file = _configure_logging(args.log_level)
    logger = logging.getLogger(__name__)
    logger.info(
        "Starting toolmark scenario=%s print=%s log=%s",
        args.scenario or "(demo)", args.print_only, log_file,
    )

    preferences = IndicatorPreferences.load(Path(args.prefs) if args.prefs else None)
    if args.animate:
        preferences.animate_by_default = True

    if args.scenario:
        try:
            specs = load_scenario(args.scenario)
        except ScenarioError as exc:
            logger.error("%s", exc)
            print(f"toolmark: {exc}", file=sys.stderr)
            sys.exit(2)
    else:
        specs = list(DEMO_SCENARIO)

    if args.print_only:
        print_snapshot(specs, preferences)
        sys.exit(0)

    from toolmark.tui.app import ToolmarkApp

    app = ToolmarkApp(specs=specs, preferences=preferences)
    app.run()


if __name__ == "__main__":
    main()
