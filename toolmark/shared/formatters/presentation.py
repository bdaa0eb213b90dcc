"""Presentation tables — tool icons, category accents and status glyphs.

Every lookup here is total: unknown tool names, categories and statuses
resolve to a default rather than raising. Colors are Rich/Textual color
strings.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from toolmark.shared.models.tool import (
    ExecutionStatus,
    ToolCategory,
    coerce_category,
    coerce_status,
)


# ── Palette & spacing ──


@dataclass(frozen=True)
class Palette:
    """Named UI colors shared by the indicator renderers."""

    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    tool: str = "green"
    tool_description: str = "grey58"
    tool_result: str = "grey70"
    network: str = "#4A90E2"

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass(frozen=True)
class Spacing:
    message_margin_top: int = 1
    result_margin_top: int = 0
    result_indent: int = 4
    padding_x: int = 1


DEFAULT_PALETTE = Palette()
DEFAULT_SPACING = Spacing()


# ── Tool icons ──

GENERIC_TOOL_ICON = "🔧"

_TOOL_ICONS: dict[str, str] = {
    "read": "📖",
    "write": "✏️",
    "edit": "📝",
    "command": "💻",
    "fetch": "🌐",
    "glob": "🔍",
    "grep": "🔎",
    "list": "📁",
    "todo": "✅",
}

_TOOL_NAME_ALIASES: dict[str, str] = {
    "bash": "command",
    "shell": "command",
    "run_bash": "command",
    "run_shell_command": "command",
    "ls": "list",
    "list_directory": "list",
    "read_file": "read",
    "write_file": "write",
    "edit_file": "edit",
    "web_fetch": "fetch",
    "todo_write": "todo",
}


def normalize_tool_name(tool_name: str) -> str:
    """Strip an MCP server prefix and map provider aliases to icon keys.

    E.g. ``mcp__files__Read`` → ``read`` and ``bash`` → ``command``.
    """
    name = (tool_name or "").strip()
    if name.startswith("mcp__") and name.count("__") >= 2:
        name = name.split("__", 2)[2]
    name = name.lower()
    return _TOOL_NAME_ALIASES.get(name, name)


def icon_for(tool_name: str) -> str:
    return _TOOL_ICONS.get(normalize_tool_name(tool_name), GENERIC_TOOL_ICON)


def accent_color_for(
    category: ToolCategory | str | None,
    palette: Palette = DEFAULT_PALETTE,
) -> str:
    """Accent color for a tool category.

    ``command`` borrows the error color as an accent; it says nothing about
    the outcome of the call.
    """
    accents = {
        ToolCategory.READ: palette.success,
        ToolCategory.WRITE: palette.warning,
        ToolCategory.COMMAND: palette.error,
        ToolCategory.NETWORK: palette.network,
    }
    return accents.get(coerce_category(category), palette.tool)


# ── Status glyphs ──

_STATUS_GLYPHS: dict[ExecutionStatus, tuple[str, str]] = {
    ExecutionStatus.PENDING: ("⏳", "yellow"),
    ExecutionStatus.RUNNING: ("🔄", "cyan"),
    ExecutionStatus.COMPLETED: ("✅", "green"),
    ExecutionStatus.ERROR: ("❌", "red"),
}


def status_glyph_for(status: ExecutionStatus | str | None) -> str:
    glyph, _color = _STATUS_GLYPHS.get(coerce_status(status), ("", ""))
    return glyph


def status_color_for(
    status: ExecutionStatus | str | None,
    palette: Palette = DEFAULT_PALETTE,
) -> str:
    entry = _STATUS_GLYPHS.get(coerce_status(status))
    if entry is None:
        return palette.tool
    return entry[1]
