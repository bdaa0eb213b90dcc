"""toolmark TUI — Textual application showing a scenario's indicators."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header

from toolmark.shared.models.tool import ExecutionStatus
from toolmark.shared.services.preferences import IndicatorPreferences
from toolmark.shared.services.scenario import DEMO_SCENARIO, IndicatorSpec
from toolmark.tui.widgets.tool_indicator import ToolIndicator, ToolPairIndicator

logger = logging.getLogger(__name__)

# Demo lifecycle for single indicators; completed and error are terminal.
_NEXT_STATUS = {
    ExecutionStatus.NONE: ExecutionStatus.PENDING,
    ExecutionStatus.PENDING: ExecutionStatus.RUNNING,
    ExecutionStatus.RUNNING: ExecutionStatus.COMPLETED,
}


class ToolmarkApp(App):
    """Terminal view of tool call indicators."""

    TITLE = "toolmark"
    SUB_TITLE = "Tool indicators"
    CSS_PATH = Path("styles/app.tcss")

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("n", "advance", "Advance"),
    ]

    def __init__(
        self,
        specs: Iterable[IndicatorSpec] | None = None,
        preferences: IndicatorPreferences | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.specs = list(DEMO_SCENARIO if specs is None else specs)
        self.preferences = preferences or IndicatorPreferences()

    def _indicator_for(self, spec: IndicatorSpec):
        prefs = self.preferences
        if spec.pair is not None:
            return ToolPairIndicator(
                spec.tool,
                display_name=spec.display_name,
                description=spec.description,
                category=spec.category,
                state=spec.pair,
                palette=prefs.palette(),
                dot_interval=prefs.dot_interval,
            )
        return ToolIndicator(
            spec.tool,
            display_name=spec.display_name,
            description=spec.description,
            status=spec.status,
            category=spec.category,
            animate=prefs.animate_by_default if spec.animate is None else spec.animate,
            palette=prefs.palette(),
            dot_interval=prefs.dot_interval,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="indicators"):
            for spec in self.specs:
                yield self._indicator_for(spec)
        yield Footer()

    def on_mount(self) -> None:
        logger.info("Mounted %d indicator(s)", len(self.specs))

    async def action_advance(self) -> None:
        """Move every single indicator one step along pending → running → completed."""
        for indicator in self.query(ToolIndicator):
            next_status = _NEXT_STATUS.get(indicator.status)
            if next_status is None:
                continue
            logger.debug(
                "Advancing %s: %s -> %s",
                indicator.tool_name, indicator.status.value, next_status.value,
            )
            await indicator.set_status(next_status)
