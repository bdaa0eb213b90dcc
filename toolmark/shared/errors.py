"""Exception hierarchy for toolmark.

Rendering never raises; these cover the file-backed layers around it.
"""
from __future__ import annotations

from pathlib import Path


class ToolmarkError(Exception):
    """Base exception for all toolmark errors."""


class ScenarioError(ToolmarkError):
    """A scenario file could not be read or describes an invalid indicator."""
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid scenario {self.path}: {reason}")
