"""Tool indicators — single-line and paired widgets for tool call state."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Static

from toolmark.shared.formatters.indicator import (
    ANIMATION,
    IndicatorRow,
    IndicatorStack,
    Span,
    build_indicator,
    build_pair_indicator,
    span_style,
)
from toolmark.shared.formatters.presentation import DEFAULT_PALETTE, Palette
from toolmark.shared.models.tool import (
    ExecutionStatus,
    PairState,
    ToolCategory,
    coerce_status,
)
from toolmark.shared.services.preferences import DEFAULT_DOT_INTERVAL
from toolmark.tui.widgets.animated_dots import AnimatedDots

# IR border names → Textual border types
_BORDER_TYPES = {
    "single": "solid",
}


class SpanText(Static):
    """One styled span of an indicator row."""

    DEFAULT_CSS = """
    SpanText {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, span: Span, **kwargs) -> None:
        self.span = span
        super().__init__(
            Text(span.text, style=span_style(span)),
            classes=f"span-{span.kind.replace('_', '-')}",
            **kwargs,
        )


class IndicatorRowView(Horizontal):
    """Mounts one ``IndicatorRow``: spans left to right, frame from the IR."""

    DEFAULT_CSS = """
    IndicatorRowView {
        width: auto;
        height: auto;
    }
    """

    def __init__(
        self,
        row: IndicatorRow,
        dot_interval: float = DEFAULT_DOT_INTERVAL,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.row = row
        self._dot_interval = dot_interval
        self.styles.padding = (0, row.padding_x)
        self.styles.margin = (row.margin_top, 0, 0, row.margin_left)
        if row.border:
            self.styles.border = (_BORDER_TYPES.get(row.border, "solid"), row.border_color)

    @property
    def framed(self) -> bool:
        return self.row.border is not None

    def compose(self) -> ComposeResult:
        for span in self.row.spans:
            if span.kind == ANIMATION:
                # Animation spans exist only on running rows.
                yield AnimatedDots(
                    prefix=span.text, color=span.color, interval=self._dot_interval,
                )
            else:
                yield SpanText(span)


class ToolIndicator(Widget):
    """Single-line indicator: icon, label, status, description, dots.

    The border and dots are derived from the current status on every
    rebuild. ``set_status`` recomposes the row, which unmounts any
    ``AnimatedDots`` child and stops its timer.
    """

    DEFAULT_CSS = """
    ToolIndicator {
        height: auto;
        width: 100%;
    }
    """

    def __init__(
        self,
        tool_name: str,
        display_name: str | None = None,
        description: str | None = None,
        status: ExecutionStatus | str | None = None,
        category: ToolCategory | str | None = None,
        animate: bool = False,
        palette: Palette = DEFAULT_PALETTE,
        dot_interval: float = DEFAULT_DOT_INTERVAL,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.tool_name = tool_name
        self.display_name = display_name
        self.description = description
        self.category = category
        self.animate = animate
        self._status = coerce_status(status)
        self._palette = palette
        self._dot_interval = dot_interval

    @property
    def status(self) -> ExecutionStatus:
        return self._status

    @property
    def row(self) -> IndicatorRow:
        return build_indicator(
            self.tool_name,
            display_name=self.display_name,
            description=self.description,
            status=self._status,
            category=self.category,
            animate=self.animate,
            palette=self._palette,
        )

    def compose(self) -> ComposeResult:
        yield IndicatorRowView(self.row, dot_interval=self._dot_interval)

    async def set_status(self, status: ExecutionStatus | str | None) -> None:
        self._status = coerce_status(status)
        await self.recompose()


class ToolPairIndicator(Widget):
    """Invocation line plus, once settled, a result line beneath it.

    Row one always shows; row two shows only when there is a result and
    nothing is running.
    """

    DEFAULT_CSS = """
    ToolPairIndicator {
        layout: vertical;
        height: auto;
        width: 100%;
    }
    """

    def __init__(
        self,
        tool_name: str,
        display_name: str | None = None,
        description: str | None = None,
        category: ToolCategory | str | None = None,
        state: PairState | None = None,
        palette: Palette = DEFAULT_PALETTE,
        dot_interval: float = DEFAULT_DOT_INTERVAL,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.tool_name = tool_name
        self.display_name = display_name
        self.description = description
        self.category = category
        self._state = state or PairState()
        self._palette = palette
        self._dot_interval = dot_interval

    @property
    def state(self) -> PairState:
        return self._state

    @property
    def stack(self) -> IndicatorStack:
        return build_pair_indicator(
            self.tool_name,
            display_name=self.display_name,
            description=self.description,
            category=self.category,
            state=self._state,
            palette=self._palette,
        )

    def compose(self) -> ComposeResult:
        stack = self.stack
        self.styles.margin = (stack.margin_top, 0, 0, 0)
        for index, row in enumerate(stack.rows):
            yield IndicatorRowView(
                row,
                dot_interval=self._dot_interval,
                classes="pair-invocation" if index == 0 else "pair-result",
            )

    async def set_state(self, state: PairState) -> None:
        self._state = state
        await self.recompose()
