"""Scenario loader — YAML description of indicators to display.

Example YAML:
    indicators:
      - tool: fetch
        category: network
        status: running
        animate: true
        description: https://example.com
      - tool: bash
        display_name: Bash
        category: command
        pair:
          has_result: true
          is_running: false
          has_error: true

An entry with a ``pair`` mapping becomes a paired indicator; anything else
is a single indicator. ``tool`` is required on every entry.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from toolmark.shared.errors import ScenarioError
from toolmark.shared.formatters.indicator import (
    IndicatorNode,
    build_indicator,
    build_pair_indicator,
)
from toolmark.shared.formatters.presentation import DEFAULT_PALETTE, Palette
from toolmark.shared.models.tool import PairState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndicatorSpec:
    """One scenario entry (before rendering)."""
    tool: str
    display_name: str | None = None
    description: str | None = None
    category: str | None = None
    status: str | None = None
    animate: bool | None = None  # None → preference default
    pair: PairState | None = None

    @property
    def is_pair(self) -> bool:
        return self.pair is not None

    def build(
        self, palette: Palette = DEFAULT_PALETTE, animate_default: bool = False,
    ) -> IndicatorNode:
        if self.pair is not None:
            return build_pair_indicator(
                self.tool,
                display_name=self.display_name,
                description=self.description,
                category=self.category,
                state=self.pair,
                palette=palette,
            )
        animate = animate_default if self.animate is None else self.animate
        return build_indicator(
            self.tool,
            display_name=self.display_name,
            description=self.description,
            status=self.status,
            category=self.category,
            animate=animate,
            palette=palette,
        )


DEMO_SCENARIO: tuple[IndicatorSpec, ...] = (
    IndicatorSpec("read", description="src/app.py", category="read", status="completed"),
    IndicatorSpec("grep", description="TODO", status="pending"),
    IndicatorSpec(
        "fetch", description="https://example.com", category="network",
        status="running", animate=True,
    ),
    IndicatorSpec("edit", display_name="Edit", description="README.md", category="write"),
    IndicatorSpec(
        "bash", display_name="Bash", description="pytest -q", category="command",
        pair=PairState(has_result=False, is_running=True),
    ),
    IndicatorSpec(
        "write", description="notes.txt", category="write",
        pair=PairState(has_result=True),
    ),
    IndicatorSpec(
        "bash", display_name="Bash", description="make deploy", category="command",
        pair=PairState(has_result=True, has_error=True),
    ),
)


def _optional_str(path: Path, index: int, entry: dict, key: str) -> str | None:
    value = entry.get(key)
    if value is None:
        return None
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise ScenarioError(path, f"indicator #{index}: '{key}' must be a string")
    return str(value)


def _optional_bool(path: Path, index: int, entry: dict, key: str) -> bool | None:
    value = entry.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ScenarioError(path, f"indicator #{index}: '{key}' must be a boolean")
    return value


def _parse_pair(path: Path, index: int, raw) -> PairState:
    if not isinstance(raw, dict):
        raise ScenarioError(path, f"indicator #{index}: 'pair' must be a mapping")
    return PairState(
        has_result=bool(_optional_bool(path, index, raw, "has_result")),
        is_running=bool(_optional_bool(path, index, raw, "is_running")),
        has_error=bool(_optional_bool(path, index, raw, "has_error")),
    )


def _parse_entry(path: Path, index: int, entry) -> IndicatorSpec:
    if not isinstance(entry, dict):
        raise ScenarioError(path, f"indicator #{index} must be a mapping")
    tool = _optional_str(path, index, entry, "tool")
    if not tool:
        raise ScenarioError(path, f"indicator #{index} is missing 'tool'")
    return IndicatorSpec(
        tool=tool,
        display_name=_optional_str(path, index, entry, "display_name"),
        description=_optional_str(path, index, entry, "description"),
        category=_optional_str(path, index, entry, "category"),
        status=_optional_str(path, index, entry, "status"),
        animate=_optional_bool(path, index, entry, "animate"),
        pair=_parse_pair(path, index, entry["pair"]) if "pair" in entry else None,
    )


def load_scenario(path: str | Path) -> list[IndicatorSpec]:
    """Load and validate a scenario YAML file.

    Raises:
        ScenarioError: if the file is missing, unparsable, or malformed.
    """
    path = Path(path)
    logger.debug("load_scenario: reading %s (exists=%s)", path, path.exists())
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ScenarioError(path, "file not found") from None
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("load_scenario: cannot read %s: %s", path, exc)
        raise ScenarioError(path, f"cannot read file: {exc}") from exc
    except yaml.YAMLError as exc:
        logger.error("load_scenario: YAML parse error in %s: %s", path, exc)
        raise ScenarioError(path, f"YAML parse error: {exc}") from exc

    if not isinstance(raw, dict):
        raise ScenarioError(path, "top level must be a mapping")
    entries = raw.get("indicators") or []
    if not isinstance(entries, list):
        raise ScenarioError(path, "'indicators' must be a list")

    specs = [_parse_entry(path, i, entry) for i, entry in enumerate(entries)]
    logger.info(
        "Loaded scenario %s — %d indicator(s), %d paired",
        path.name, len(specs), sum(1 for s in specs if s.is_pair),
    )
    return specs
