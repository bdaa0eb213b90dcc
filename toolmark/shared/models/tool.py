"""Tool identity, category, status and paired-call state models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ToolCategory(Enum):
    READ = "read"
    WRITE = "write"
    COMMAND = "command"
    NETWORK = "network"
    NONE = "none"


class ExecutionStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    ERROR = "error"
    NONE = "none"


def coerce_category(value: ToolCategory | str | None) -> ToolCategory:
    """Map an enum member, a string or None to a ToolCategory.

    Unknown values become ``ToolCategory.NONE``.
    """
    if isinstance(value, ToolCategory):
        return value
    if isinstance(value, str):
        try:
            return ToolCategory(value.strip().lower())
        except ValueError:
            return ToolCategory.NONE
    return ToolCategory.NONE


def coerce_status(value: ExecutionStatus | str | None) -> ExecutionStatus:
    """Map an enum member, a string or None to an ExecutionStatus.

    Unknown values become ``ExecutionStatus.NONE``.
    """
    if isinstance(value, ExecutionStatus):
        return value
    if isinstance(value, str):
        try:
            return ExecutionStatus(value.strip().lower())
        except ValueError:
            return ExecutionStatus.NONE
    return ExecutionStatus.NONE


@dataclass(frozen=True)
class ToolIdentity:
    tool_name: str
    display_name: str | None = None

    @property
    def label(self) -> str:
        """Display name when set, otherwise the raw tool name."""
        return self.display_name or self.tool_name


@dataclass(frozen=True)
class PairState:
    """Flags describing an invocation → result tool call.

    Any combination is accepted; the producer owns consistency.
    """

    has_result: bool = False
    is_running: bool = False
    has_error: bool = False

    @property
    def shows_result_row(self) -> bool:
        return self.has_result and not self.is_running

    @property
    def marker_status(self) -> ExecutionStatus:
        """Status whose glyph marks the invocation line.

        Precedence: running > error > success > none.
        """
        if self.is_running:
            return ExecutionStatus.RUNNING
        if self.has_error:
            return ExecutionStatus.ERROR
        if self.has_result:
            return ExecutionStatus.COMPLETED
        return ExecutionStatus.NONE
