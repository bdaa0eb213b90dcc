"""Tests for toolmark.shared.formatters.indicator — layout IR builders and Rich rendering."""

from rich.console import Console

from toolmark.shared.formatters.indicator import (
    ANIMATION,
    DESCRIPTION,
    ICON,
    LABEL,
    RESULT_MARKER,
    RESULT_MESSAGE,
    STATUS,
    IndicatorRow,
    IndicatorStack,
    build_indicator,
    build_pair_indicator,
    dots_for_tick,
    render_indicator_rich,
    render_row_text,
)
from toolmark.shared.formatters.presentation import Palette, Spacing
from toolmark.shared.models.tool import ExecutionStatus, PairState


def _plain(renderable) -> str:
    console = Console(record=True, width=100, color_system=None)
    console.print(renderable)
    return console.export_text()


# ── Animation phases ──


class TestDotsForTick:
    def test_cycle(self):
        frames = [dots_for_tick(t) for t in range(7)]
        assert frames == [".", "..", "...", ".", "..", "...", "."]

    def test_far_ticks_stay_in_cycle(self):
        assert dots_for_tick(3_000) == "."
        assert dots_for_tick(3_001) == ".."


# ── Single indicator ──


class TestBuildIndicator:
    def test_fetch_running_animated(self):
        row = build_indicator(
            "fetch", category="network", status="running", animate=True,
        )
        assert row.kinds == [ICON, LABEL, STATUS, ANIMATION]
        icon = row.span(ICON)
        assert icon.text == "🌐 "
        assert icon.color == "#4A90E2"
        label = row.span(LABEL)
        assert label.text == "fetch"
        assert label.bold
        assert row.span(STATUS).text == " 🔄"
        assert row.span(STATUS).color == "cyan"
        assert row.span(ANIMATION).color == "cyan"
        assert row.border == "single"
        assert row.border_color == "cyan"
        assert row.animated

    def test_unknown_tool_no_status(self):
        row = build_indicator("unknownTool")
        assert row.kinds == [ICON, LABEL]
        assert row.span(ICON).text == "🔧 "
        assert row.span(ICON).color == Palette().tool
        assert row.border is None
        assert row.border_color is None
        assert not row.animated

    def test_order_with_all_fields(self):
        row = build_indicator(
            "grep", display_name="Search", description="TODO",
            status="running", category="read", animate=True,
        )
        assert row.kinds == [ICON, LABEL, STATUS, DESCRIPTION, ANIMATION]
        assert row.span(LABEL).text == "Search"
        assert row.span(DESCRIPTION).text == " (TODO)"
        assert row.span(DESCRIPTION).color == Palette().tool_description
        assert row.plain == "🔎 Search 🔄 (TODO) ."

    def test_animation_requires_running_and_flag(self):
        for status in ExecutionStatus:
            for animate in (True, False):
                row = build_indicator("bash", status=status, animate=animate)
                expected = animate and status is ExecutionStatus.RUNNING
                assert row.animated is expected, (status, animate)

    def test_border_only_while_running(self):
        for status in ExecutionStatus:
            row = build_indicator("bash", status=status)
            assert (row.border is not None) is (status is ExecutionStatus.RUNNING)

    def test_empty_description_omitted(self):
        row = build_indicator("read", description="")
        assert DESCRIPTION not in row.kinds

    def test_status_color_follows_status(self):
        row = build_indicator("read", status="error", category="read")
        assert row.span(STATUS).text == " ❌"
        assert row.span(STATUS).color == "red"
        # accent stays the category's, not the outcome's
        assert row.span(ICON).color == Palette().success

    def test_spacing_hints(self):
        row = build_indicator("read", spacing=Spacing(message_margin_top=2, padding_x=3))
        assert row.margin_top == 2
        assert row.padding_x == 3
        assert row.margin_left == 0


# ── Paired indicator ──


class TestBuildPairIndicator:
    def test_running_overrides_everything(self):
        stack = build_pair_indicator(
            "bash", state=PairState(has_result=True, is_running=True, has_error=True),
        )
        assert len(stack.rows) == 1
        row = stack.rows[0]
        assert row.span(STATUS).text == " 🔄"
        assert row.span(STATUS).color == "cyan"
        assert row.animated
        assert "❌" not in row.plain

    def test_success(self):
        stack = build_pair_indicator("write", state=PairState(has_result=True))
        assert len(stack.rows) == 2
        invocation, result = stack.rows
        assert invocation.span(STATUS).text == " ✅"
        assert invocation.span(STATUS).color == "green"
        assert result.span(RESULT_MARKER).text == "↳"
        assert result.span(RESULT_MESSAGE).text == " Completed successfully"
        assert result.span(RESULT_MESSAGE).color == Palette().tool_result
        assert result.margin_left == 4

    def test_failure(self):
        stack = build_pair_indicator(
            "bash", state=PairState(has_result=True, has_error=True),
        )
        invocation, result = stack.rows
        assert invocation.span(STATUS).text == " ❌"
        assert result.span(RESULT_MESSAGE).text == " Execution failed"
        assert result.span(RESULT_MESSAGE).color == Palette().error

    def test_error_without_result(self):
        stack = build_pair_indicator("bash", state=PairState(has_error=True))
        assert len(stack.rows) == 1
        assert stack.rows[0].span(STATUS).text == " ❌"

    def test_neutral(self):
        stack = build_pair_indicator("bash", description="ls -la")
        assert len(stack.rows) == 1
        assert stack.rows[0].kinds == [ICON, LABEL, DESCRIPTION]

    def test_description_after_marker(self):
        stack = build_pair_indicator(
            "bash", description="make", state=PairState(is_running=True),
        )
        assert stack.rows[0].kinds == [ICON, LABEL, STATUS, ANIMATION, DESCRIPTION]

    def test_pair_rows_never_framed(self):
        stack = build_pair_indicator("bash", state=PairState(is_running=True))
        assert all(row.border is None for row in stack.rows)
        assert stack.margin_top == Spacing().message_margin_top


# ── Rich rendering ──


class TestRenderRich:
    def test_row_text_advances_dots(self):
        row = build_indicator("fetch", status="running", animate=True)
        assert render_row_text(row, 0).plain.endswith(" .")
        assert render_row_text(row, 2).plain.endswith(" ...")

    def test_label_style_is_bold(self):
        row = build_indicator("read")
        text = render_row_text(row)
        styles = [str(span.style) for span in text.spans]
        assert any("bold" in style for style in styles)

    def test_running_row_is_boxed(self):
        out = _plain(render_indicator_rich(build_indicator("fetch", status="running")))
        assert "┌" in out and "┘" in out
        assert "fetch" in out

    def test_settled_row_is_not_boxed(self):
        out = _plain(render_indicator_rich(build_indicator("fetch", status="completed")))
        assert "┌" not in out
        assert "✅" in out

    def test_stack_renders_result_line(self):
        stack = build_pair_indicator("bash", state=PairState(has_result=True, has_error=True))
        out = _plain(render_indicator_rich(stack))
        assert "↳ Execution failed" in out
        assert out.index("bash") < out.index("Execution failed")

    def test_node_types(self):
        assert isinstance(build_indicator("x"), IndicatorRow)
        assert isinstance(build_pair_indicator("x"), IndicatorStack)
