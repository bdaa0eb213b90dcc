"""Indicator layout IR — declarative rows of styled spans.

The builders here turn tool identity, status and pair flags into a small
intermediate representation. Renderers interpret the IR: the Textual
widgets in ``toolmark.tui.widgets`` mount it, and ``render_indicator_rich``
below converts it to Rich renderables for plain console output.

Span order inside a single row is fixed:

    icon → label → status → description → animation

A paired indicator is a column of one or two rows: the invocation line and,
once a result has arrived and nothing is running, the result line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from rich import box
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from toolmark.shared.formatters.presentation import (
    DEFAULT_PALETTE,
    DEFAULT_SPACING,
    Palette,
    Spacing,
    accent_color_for,
    icon_for,
    status_color_for,
    status_glyph_for,
)
from toolmark.shared.models.tool import (
    ExecutionStatus,
    PairState,
    ToolCategory,
    ToolIdentity,
    coerce_status,
)

# Span kinds
ICON = "icon"
LABEL = "label"
STATUS = "status"
DESCRIPTION = "description"
ANIMATION = "animation"
RESULT_MARKER = "result_marker"
RESULT_MESSAGE = "result_message"

RESULT_ARROW = "↳"
RESULT_OK = "Completed successfully"
RESULT_FAILED = "Execution failed"

DOT_FRAMES: tuple[str, ...] = (".", "..", "...")


def dots_for_tick(tick: int) -> str:
    """Dot suffix after ``tick`` advances: ``.`` → ``..`` → ``...`` → ``.``"""
    return DOT_FRAMES[tick % len(DOT_FRAMES)]


# ── Intermediate Representation ──


@dataclass(frozen=True)
class Span:
    """A styled text run.

    For ``animation`` spans, ``text`` is the separator printed before the
    dots; the dots themselves come from the animation driver.
    """

    kind: str
    text: str = ""
    color: str = ""
    bold: bool = False


@dataclass(frozen=True)
class IndicatorRow:
    """A horizontal row of spans plus positioning hints."""

    spans: tuple[Span, ...]
    padding_x: int = 0
    margin_top: int = 0
    margin_left: int = 0
    border: str | None = None  # "single" while running, else None
    border_color: str | None = None

    @property
    def animated(self) -> bool:
        return any(s.kind == ANIMATION for s in self.spans)

    def span(self, kind: str) -> Span | None:
        for s in self.spans:
            if s.kind == kind:
                return s
        return None

    @property
    def kinds(self) -> list[str]:
        return [s.kind for s in self.spans]

    @property
    def plain(self) -> str:
        """Row text with the animation frozen at its first frame."""
        parts = []
        for s in self.spans:
            parts.append(s.text + (dots_for_tick(0) if s.kind == ANIMATION else ""))
        return "".join(parts)


@dataclass(frozen=True)
class IndicatorStack:
    """A vertical stack of rows."""

    rows: tuple[IndicatorRow, ...] = field(default_factory=tuple)
    margin_top: int = 0

    @property
    def animated(self) -> bool:
        return any(row.animated for row in self.rows)


IndicatorNode = Union[IndicatorRow, IndicatorStack]


# ── Builders ──


def _head_spans(identity: ToolIdentity, category, palette: Palette) -> list[Span]:
    return [
        Span(ICON, f"{icon_for(identity.tool_name)} ", accent_color_for(category, palette)),
        Span(LABEL, identity.label, palette.tool, bold=True),
    ]


def _description_span(description: str | None, palette: Palette) -> list[Span]:
    if not description:
        return []
    return [Span(DESCRIPTION, f" ({description})", palette.tool_description)]


def build_indicator(
    tool_name: str,
    display_name: str | None = None,
    description: str | None = None,
    status: ExecutionStatus | str | None = None,
    category: ToolCategory | str | None = None,
    animate: bool = False,
    palette: Palette = DEFAULT_PALETTE,
    spacing: Spacing = DEFAULT_SPACING,
) -> IndicatorRow:
    """Build the single-line indicator for one tool call."""
    identity = ToolIdentity(tool_name, display_name)
    status = coerce_status(status)
    status_color = status_color_for(status, palette)
    running = status is ExecutionStatus.RUNNING

    spans = _head_spans(identity, category, palette)
    if status is not ExecutionStatus.NONE:
        spans.append(Span(STATUS, f" {status_glyph_for(status)}", status_color))
    spans.extend(_description_span(description, palette))
    if animate and running:
        spans.append(Span(ANIMATION, " ", status_color))

    return IndicatorRow(
        spans=tuple(spans),
        padding_x=spacing.padding_x,
        margin_top=spacing.message_margin_top,
        border="single" if running else None,
        border_color=status_color if running else None,
    )


def build_pair_indicator(
    tool_name: str,
    display_name: str | None = None,
    description: str | None = None,
    category: ToolCategory | str | None = None,
    state: PairState | None = None,
    palette: Palette = DEFAULT_PALETTE,
    spacing: Spacing = DEFAULT_SPACING,
) -> IndicatorStack:
    """Build the invocation line and, when settled, the result line."""
    identity = ToolIdentity(tool_name, display_name)
    state = state or PairState()

    spans = _head_spans(identity, category, palette)
    marker = state.marker_status
    if marker is not ExecutionStatus.NONE:
        color = status_color_for(marker, palette)
        spans.append(Span(STATUS, f" {status_glyph_for(marker)}", color))
        if marker is ExecutionStatus.RUNNING:
            spans.append(Span(ANIMATION, " ", color))
    spans.extend(_description_span(description, palette))

    rows = [IndicatorRow(spans=tuple(spans), padding_x=spacing.padding_x)]

    if state.shows_result_row:
        if state.has_error:
            message = Span(RESULT_MESSAGE, f" {RESULT_FAILED}", palette.error)
        else:
            message = Span(RESULT_MESSAGE, f" {RESULT_OK}", palette.tool_result)
        rows.append(
            IndicatorRow(
                spans=(Span(RESULT_MARKER, RESULT_ARROW, palette.tool_result), message),
                margin_top=spacing.result_margin_top,
                margin_left=spacing.result_indent,
            )
        )

    return IndicatorStack(rows=tuple(rows), margin_top=spacing.message_margin_top)


# ── Rich Renderer (for console output) ──


def span_style(span: Span) -> str:
    parts = []
    if span.bold:
        parts.append("bold")
    if span.color:
        parts.append(span.color)
    return " ".join(parts)


def render_row_text(row: IndicatorRow, tick: int = 0) -> Text:
    """Render a row's spans as one Rich Text, dots at ``tick``."""
    text = Text()
    for span in row.spans:
        content = span.text
        if span.kind == ANIMATION:
            content += dots_for_tick(tick)
        text.append(content, style=span_style(span))
    return text


def _render_row_rich(row: IndicatorRow, tick: int, extra_top: int = 0) -> RenderableType:
    text = render_row_text(row, tick)
    top = row.margin_top + extra_top
    if row.border:
        panel = Panel(
            text,
            box=box.SQUARE,
            border_style=row.border_color or "",
            padding=(0, row.padding_x),
            expand=False,
        )
        return Padding(panel, (top, 0, 0, row.margin_left))
    return Padding(text, (top, row.padding_x, 0, row.margin_left + row.padding_x))


def render_indicator_rich(node: IndicatorNode, tick: int = 0) -> RenderableType:
    """Convert an indicator node to a Rich renderable."""
    if isinstance(node, IndicatorRow):
        return _render_row_rich(node, tick)
    rendered = []
    for index, row in enumerate(node.rows):
        rendered.append(_render_row_rich(row, tick, node.margin_top if index == 0 else 0))
    return Group(*rendered)
